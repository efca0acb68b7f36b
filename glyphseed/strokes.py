"""
Per-character stroke motifs for live typing.

These are a separate motif palette from the full-scene builder: a typed
character grows an arc, a twig, a petal cluster, a rune bar or a spark
cluster on top of the existing scene.
"""

import itertools
import math
import re
from enum import Enum
from typing import Callable

from glyphseed.elements import Element, InsigniaParams
from glyphseed.rng import RNG, make_rng, step_hash
from glyphseed.scene_builder import path_data, petal_points, polar

_SYMBOL_RE = re.compile(r"[^\w\s]")
VOWELS = frozenset("aeiouAEIOU")
DIGITS = frozenset("0123456789")


class LiveIds:
    """Allocates live element ids; one allocator per session, never reset."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)

    def __call__(self, prefix: str, index: int, k: int) -> str:
        return f"live-{prefix}-{index}-{k}-{next(self._counter)}"


StrokeFn = Callable[[RNG, InsigniaParams, int, LiveIds], list[Element]]


def pick_radius_band(rand: RNG, band: int) -> float:
    t = (band + rand()) / 6
    return 140 + t * 220


# -------------------------
# Motifs
# -------------------------


def stroke_ring_arc(
    rand: RNG, params: InsigniaParams, index: int, ids: LiveIds
) -> list[Element]:
    r = pick_radius_band(rand, index % 6)
    span = (math.pi / 8) * (0.5 + rand())
    center_angle = rand() * math.pi * 2
    start = center_angle - span / 2

    steps = 16
    pts = []
    for i in range(steps + 1):
        t = i / steps
        rr = r + math.sin(t * math.pi) * 8 * params.curve_bias
        pts.append(polar(rr, start + span * t))

    return [
        Element(
            id=ids("arc", index, 0),
            type="path",
            layer="curves",
            d=path_data(pts),
            stroke=params.palette.main2 if rand() < 0.5 else params.palette.main3,
            stroke_width=1.0 + rand() * 1.8,
            opacity=0.24 + rand() * 0.2,
            fill="none",
        )
    ]


def stroke_radial_branch(
    rand: RNG, params: InsigniaParams, index: int, ids: LiveIds
) -> list[Element]:
    els: list[Element] = []
    base_angle = rand() * math.pi * 2
    start_r = 160 + (index % 5) * 10
    length = 40 + rand() * 40
    depth = 2 if rand() < 0.4 else 1

    def segment(
        x: float, y: float, angle: float, seg_len: float, d: int, k: int
    ) -> None:
        x2 = x + seg_len * math.cos(angle)
        y2 = y + seg_len * math.sin(angle)
        els.append(
            Element(
                id=ids("tw", index, k + d),
                type="line",
                layer="branches",
                x1=x,
                y1=y,
                x2=x2,
                y2=y2,
                stroke=params.palette.subtle,
                stroke_width=max(0.7, 2.2 - d * 0.5),
                opacity=0.18 + 0.12 * d,
            )
        )
        if d <= 0:
            return
        next_len = seg_len * (0.65 + rand() * 0.15)
        delta = (math.pi / 10) * (0.7 + rand() * 0.4)
        segment(x2, y2, angle + delta, next_len, d - 1, k + 3)
        segment(x2, y2, angle - delta, next_len, d - 1, k + 7)

    sx, sy = polar(start_r, base_angle)
    segment(sx, sy, base_angle, length, depth, 0)
    return els


def stroke_petal_cluster(
    rand: RNG, params: InsigniaParams, index: int, ids: LiveIds
) -> list[Element]:
    radius = pick_radius_band(rand, (index + 2) % 6)
    center_angle = rand() * math.pi * 2
    petals = 3 + math.floor(rand() * 3)
    size = 16 + rand() * 10

    els = []
    for p in range(petals):
        angle = center_angle + (p - (petals - 1) / 2) * (math.pi / 18)
        cx, cy = polar(radius, angle)
        els.append(
            Element(
                id=ids("pt", index, p),
                type="polygon",
                layer="petals",
                points=petal_points(cx, cy, angle, size),
                fill=params.palette.main1 if rand() < 0.5 else params.palette.main2,
                opacity=0.38 + rand() * 0.18,
            )
        )
    return els


def stroke_glyph_rune(
    rand: RNG, params: InsigniaParams, index: int, ids: LiveIds
) -> list[Element]:
    radius = 260 + (index % 5) * 6
    cx, cy = polar(radius, rand() * math.pi * 2)

    w = 14 + rand() * 10
    h = 3 + rand() * 4
    rot = rand() * math.pi * 2
    cos, sin = math.cos(rot), math.sin(rot)

    corners = ((-w / 2, -h / 2), (w / 2, -h / 2), (w / 2, h / 2), (-w / 2, h / 2))
    pts = tuple(
        (cx + dx * cos - dy * sin, cy + dx * sin + dy * cos) for dx, dy in corners
    )

    return [
        Element(
            id=ids("ru", index, 0),
            type="polygon",
            layer="accents",
            points=pts,
            fill=params.palette.main3,
            opacity=0.86,
        )
    ]


def stroke_spark_cluster(
    rand: RNG, params: InsigniaParams, index: int, ids: LiveIds
) -> list[Element]:
    base_radius = 190 + rand() * 120
    center_angle = rand() * math.pi * 2
    count = 4 + math.floor(rand() * 5)

    els = []
    for i in range(count):
        offset = (rand() - 0.5) * (math.pi / 8)
        r = base_radius + (rand() - 0.5) * 18
        x, y = polar(r, center_angle + offset)
        els.append(
            Element(
                id=ids("sp", index, i),
                type="circle",
                layer="accents",
                cx=x,
                cy=y,
                r=1.6 + rand() * 1.6,
                fill=params.palette.highlight,
                opacity=0.45 + rand() * 0.2,
            )
        )
    return els


# -------------------------
# Dispatch
# -------------------------


class Motif(Enum):
    ARC = "arc"
    BRANCH = "branch"
    PETAL = "petal"
    RUNE = "rune"
    SPARK = "spark"


class CharClass(Enum):
    VOWEL = "vowel"
    DIGIT = "digit"
    SPACE = "space"
    SYMBOL = "symbol"
    CONSONANT = "consonant"


MOTIF_STROKES: dict[Motif, StrokeFn] = {
    Motif.ARC: stroke_ring_arc,
    Motif.BRANCH: stroke_radial_branch,
    Motif.PETAL: stroke_petal_cluster,
    Motif.RUNE: stroke_glyph_rune,
    Motif.SPARK: stroke_spark_cluster,
}

# first entry is the primary motif of the family
MOTIF_FAMILIES: dict[CharClass, tuple[Motif, ...]] = {
    CharClass.VOWEL: (Motif.SPARK, Motif.PETAL),
    CharClass.CONSONANT: (Motif.BRANCH, Motif.ARC),
    CharClass.DIGIT: (Motif.RUNE,),
    CharClass.SYMBOL: (Motif.RUNE,),
    CharClass.SPACE: (),
}


def classify_char(ch: str) -> CharClass:
    if ch.isspace():
        return CharClass.SPACE
    if ch in DIGITS:
        return CharClass.DIGIT
    if ch in VOWELS:
        return CharClass.VOWEL
    if _SYMBOL_RE.match(ch):
        return CharClass.SYMBOL
    return CharClass.CONSONANT


def choose_motif(char_class: CharClass, r: float) -> Motif | None:
    """Pick a motif from the class family using the 20%-wide bin of r."""
    family = MOTIF_FAMILIES[char_class]
    if not family:
        return None
    bin_index = min(int(r * 5), 4)
    return family[bin_index % len(family)]


def apply_char_rule(
    ch: str, index: int, params: InsigniaParams, live_hash: int, ids: LiveIds
) -> tuple[int, list[Element]]:
    """
    Advance the running hash with one character and grow its stroke.

    Returns the new hash and the produced elements. Whitespace still advances
    the hash but produces nothing.
    """
    new_hash = step_hash(live_hash, ord(ch), index)
    rand = make_rng(new_hash)

    motif = choose_motif(classify_char(ch), rand())
    if motif is None:
        return new_hash, []
    return new_hash, MOTIF_STROKES[motif](rand, params, index, ids)
