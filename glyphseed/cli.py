"""Command-line front-end: grow, live-type and inspect insignias."""

import argparse
import json
import logging
from pathlib import Path

from glyphseed.config import AppConfig, load_config
from glyphseed.debounce import Debouncer
from glyphseed.file_utils import ensure_output_dir, export_name, svg_to_png
from glyphseed.live import LiveSession
from glyphseed.params import (
    PALETTE_MODES,
    analyse_text,
    build_params_from_text,
    format_stats_hint,
    layout_label,
    seed_hex,
)
from glyphseed.svg_export import write_svg

logger = logging.getLogger(__name__)


def _export(session: LiveSession, cfg: AppConfig, out_dir: Path, png: bool) -> None:
    params = session.state.params_base
    logger.debug("Exporting seed %s", seed_hex(params.seed))
    ensure_output_dir(out_dir)
    svg_path = write_svg(
        session.state.elements,
        out_dir / export_name(params.seed, ".svg"),
        cfg.export.svg_size,
    )
    print(f"Wrote {svg_path}")

    if png:
        size = cfg.export.png_size
        png_path = svg_to_png(
            svg_path, out_dir / export_name(params.seed, ".png", size), size
        )
        print(f"Wrote {png_path} ({size} x {size})")


def cmd_grow(args: argparse.Namespace, cfg: AppConfig) -> None:
    session = LiveSession(config=cfg)
    session.generate(args.text, args.palette)
    if session.status_error:
        raise ValueError(session.status)

    if args.json:
        print(json.dumps([el.to_dict() for el in session.state.elements], indent=2))
        return
    _export(session, cfg, args.out or Path(cfg.export.output), args.png)


def cmd_type(args: argparse.Namespace, cfg: AppConfig) -> None:
    """Replay the text as keystrokes through the debouncer and live session."""
    session = LiveSession(config=cfg)

    def on_fire(value: str) -> None:
        session.on_text_change(value, args.palette)
        print(
            f"{session.last_edit.value:<9} {len(session.state.text):>4} chars "
            f"{len(session.state.elements):>5} elements"
        )

    debouncer: Debouncer[str] = Debouncer(on_fire, cfg.live.debounce_ms)
    step = args.interval if args.interval is not None else cfg.live.keystroke_ms

    values = [args.text[:i] for i in range(1, len(args.text) + 1)]
    values += [
        args.text[: len(args.text) - i]
        for i in range(1, min(args.backspace, len(args.text)) + 1)
    ]

    now = 0
    for value in values:
        debouncer.poll(now)
        debouncer.push(value, now)
        now += step
    debouncer.poll(now + cfg.live.debounce_ms)

    if not session.state.initialised:
        print("Nothing left to export.")
        return
    _export(session, cfg, args.out or Path(cfg.export.output), args.png)


def cmd_stats(args: argparse.Namespace, cfg: AppConfig) -> None:
    text = args.text.strip()
    print(format_stats_hint(analyse_text(args.text)))
    if not text:
        return
    params = build_params_from_text(text, args.palette or cfg.style.palette_mode)
    print(f"Seed: {seed_hex(params.seed)}")
    print(f"Layout: {layout_label(params.layout_mode)}")
    print(f"Symmetry: {params.symmetry} fold")
    print(f"Detail: {params.detail_level:.1f}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glyphseed", description="Grow a vector insignia from text."
    )
    parser.add_argument(
        "--config", type=Path, default=None, help="Path to config.toml."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def common(p: argparse.ArgumentParser) -> None:
        p.add_argument("text", help="Text to grow the insignia from.")
        p.add_argument(
            "--palette",
            choices=sorted(PALETTE_MODES),
            default=None,
            help="Palette mode (default from config).",
        )

    grow = sub.add_parser("grow", help="Grow an insignia and export it.")
    common(grow)
    grow.add_argument("--out", type=Path, default=None, help="Output directory.")
    grow.add_argument("--png", action="store_true", help="Also export a PNG.")
    grow.add_argument("--json", action="store_true", help="Print elements as JSON.")
    grow.set_defaults(func=cmd_grow)

    live = sub.add_parser("type", help="Replay text as live keystrokes.")
    common(live)
    live.add_argument(
        "--interval", type=int, default=None, help="Milliseconds between keystrokes."
    )
    live.add_argument(
        "--backspace", type=int, default=0, help="Backspaces to type after the text."
    )
    live.add_argument("--out", type=Path, default=None, help="Output directory.")
    live.add_argument("--png", action="store_true", help="Also export a PNG.")
    live.set_defaults(func=cmd_type)

    stats = sub.add_parser("stats", help="Show text statistics and parameters.")
    common(stats)
    stats.set_defaults(func=cmd_stats)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = load_config(args.config)
    if args.palette is None:
        args.palette = cfg.style.palette_mode
    args.func(args, cfg)


if __name__ == "__main__":
    main()
