"""Derive the insignia parameter bundle and palette from text."""

import colorsys
import math
import re
from dataclasses import dataclass

from glyphseed.elements import InsigniaParams, Palette
from glyphseed.rng import MASK32, make_rng

# mode -> (fixed hue in degrees or None for seed-derived, saturation scale)
PALETTE_MODES: dict[str, tuple[float | None, float]] = {
    "auto": (None, 1.0),
    "ember": (18.0, 1.0),
    "tide": (200.0, 1.0),
    "verdant": (140.0, 0.9),
    "mono": (0.0, 0.0),
}

LAYOUT_LABELS = ("Radial crest", "Orbital emblem", "Layered totem", "Shield pattern")

_VOWEL_RE = re.compile(r"[aeiou]", re.IGNORECASE)
_CONSONANT_RE = re.compile(r"[bcdfghjklmnpqrstvwxyz]", re.IGNORECASE)
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile(r"[^\w\s]")


# -------------------------
# Text statistics
# -------------------------


@dataclass(frozen=True)
class TextStats:
    length: int
    vowels: int
    consonants: int
    digits: int
    symbols: int


def analyse_text(text: str) -> TextStats:
    return TextStats(
        length=len(text),
        vowels=len(_VOWEL_RE.findall(text)),
        consonants=len(_CONSONANT_RE.findall(text)),
        digits=len(_DIGIT_RE.findall(text)),
        symbols=len(_SYMBOL_RE.findall(text)),
    )


def format_stats_hint(stats: TextStats) -> str:
    return (
        f"{stats.length} characters • "
        f"{stats.vowels} vowels • "
        f"{stats.consonants} consonants • "
        f"{stats.digits} digits • "
        f"{stats.symbols} symbols"
    )


def layout_label(mode: int) -> str:
    if 0 <= mode < len(LAYOUT_LABELS):
        return LAYOUT_LABELS[mode]
    return "Unknown"


def seed_hex(seed: int) -> str:
    return f"0x{seed:08x}"


# -------------------------
# Seed + palette
# -------------------------


def text_seed(text: str) -> int:
    """FNV-1a over the UTF-8 bytes of the text."""
    h = 0x811C9DC5
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * 0x01000193) & MASK32
    return h


def _hsl_hex(hue: float, saturation: float, lightness: float) -> str:
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360, lightness, saturation)
    return "#{:02x}{:02x}{:02x}".format(round(r * 255), round(g * 255), round(b * 255))


def build_palette(hue: float, saturation_scale: float = 1.0) -> Palette:
    s = saturation_scale
    return Palette(
        main1=_hsl_hex(hue, 0.70 * s, 0.62),
        main2=_hsl_hex(hue + 30, 0.65 * s, 0.55),
        main3=_hsl_hex(hue - 40, 0.55 * s, 0.68),
        subtle=_hsl_hex(hue, 0.18 * s, 0.78),
        highlight=_hsl_hex(hue + 180, 0.85 * s, 0.70),
        background_inner=_hsl_hex(hue, 0.35 * s, 0.16),
        background_outer=_hsl_hex(hue, 0.30 * s, 0.05),
    )


def build_params_from_text(text: str, palette_mode: str = "auto") -> InsigniaParams:
    """
    Derive a parameter bundle from text.

    The seed depends on the text only, so switching palette mode recolours the
    same layout.
    """
    if palette_mode not in PALETTE_MODES:
        raise ValueError(
            f"Unknown palette mode {palette_mode!r}. "
            f"Expected one of {sorted(PALETTE_MODES)}"
        )

    seed = text_seed(text)
    rand = make_rng(seed)
    stats = analyse_text(text)
    n = max(stats.length, 1)

    symmetry = 5 + (stats.length + math.floor(rand() * 4)) % 6
    detail_level = min(6.0, 1.0 + stats.length / 8 + rand() * 2)
    structure_level = min(
        1.0, (stats.consonants + stats.digits) / n * 0.7 + rand() * 0.3
    )
    curve_bias = min(1.0, stats.vowels / n * 1.2 + rand() * 0.35)
    accent_level = 1 + min(
        12, stats.symbols * 2 + stats.digits + math.floor(rand() * 4)
    )
    layout_mode = math.floor(rand() * 4)

    fixed_hue, saturation = PALETTE_MODES[palette_mode]
    hue = rand() * 360 if fixed_hue is None else fixed_hue

    return InsigniaParams(
        seed=seed,
        palette=build_palette(hue, saturation),
        symmetry=symmetry,
        detail_level=detail_level,
        structure_level=structure_level,
        curve_bias=curve_bias,
        accent_level=accent_level,
        layout_mode=layout_mode,
        palette_mode=palette_mode,
    )
