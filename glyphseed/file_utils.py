"""File helpers for exporting insignias."""

import os
import sys
from pathlib import Path

from glyphseed import variables
from glyphseed.params import seed_hex


def export_name(seed: int, suffix: str, size: int | None = None) -> str:
    """
    Build the download-style file name for a seed.
    Example: export_name(0x1a2b, ".png", 1024) -> glyphseed-00001a2b-1024.png
    """
    if not suffix.startswith("."):
        suffix = f".{suffix}"
    stem = f"{variables.EXPORT_PREFIX}-{seed_hex(seed)[2:]}"
    if size is not None:
        stem = f"{stem}-{size}"
    return f"{stem}{suffix}"


def ensure_output_dir(directory: Path) -> Path:
    if directory.exists() and not directory.is_dir():
        raise NotADirectoryError(directory)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def svg_to_png(
    source: Path, target: Path | None = None, size: int | None = None
) -> Path:
    """
    Convert an SVG file to a square PNG using cairosvg.
    """
    if not source.exists():
        raise FileNotFoundError(source)

    output_path = target or source.with_suffix(".png")

    if sys.platform == "darwin":
        _ensure_macos_cairo_path()

    try:
        import cairosvg
    except ModuleNotFoundError as exc:
        raise ModuleNotFoundError(
            "cairosvg is required for svg_to_png (pip install cairosvg)."
        ) from exc

    kwargs = {}
    if size is not None:
        kwargs = {"output_width": size, "output_height": size}
    cairosvg.svg2png(url=str(source), write_to=str(output_path), **kwargs)
    return output_path


def _ensure_macos_cairo_path() -> None:
    if os.environ.get("DYLD_FALLBACK_LIBRARY_PATH"):
        return

    candidates = ["/opt/homebrew/lib", "/usr/local/lib"]
    existing = [path for path in candidates if Path(path).is_dir()]
    if not existing:
        return

    os.environ["DYLD_FALLBACK_LIBRARY_PATH"] = ":".join(existing)
