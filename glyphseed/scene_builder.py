"""Build the complete from-scratch insignia scene for a parameter bundle."""

import logging
import math

from glyphseed.elements import (
    CENTER,
    BlurFilter,
    Element,
    GradientStop,
    InsigniaParams,
    Point,
    RadialGradient,
)
from glyphseed.rng import make_rng

logger = logging.getLogger(__name__)

RADIUS_BASE = 120
RADIUS_MAX = 360

MAX_RINGS = 9
MAX_SPOKES = 120
MAX_ACCENTS = 40

PETAL_RADIUS = 210
CURVE_SEGMENTS = 64

# layout_mode -> center polygon side count
CENTER_SIDES = (4, 5, 6, 8)

GRADIENT_ID = "bgGradient"
BLUR_ID = "softBlur"


def polar(radius: float, angle: float, cx: float = CENTER, cy: float = CENTER) -> Point:
    return (cx + radius * math.cos(angle), cy + radius * math.sin(angle))


def path_data(points: list[Point]) -> str:
    return "M " + " L ".join(f"{x:.3f} {y:.3f}" for x, y in points)


def petal_points(cx: float, cy: float, angle: float, size: float) -> tuple[Point, ...]:
    # four-point diamond, long along the angle and short across it
    pts = []
    for k in range(4):
        a = angle + k * (math.pi / 2)
        s = 1.0 if k % 2 == 0 else 0.55
        pts.append((cx + size * s * math.cos(a), cy + size * s * math.sin(a)))
    return tuple(pts)


class SceneBuilder:
    """
    Grows one scene. Owns its id counter and RNG stream, so every call to
    build() on a fresh builder starts from the same state.
    """

    def __init__(self, params: InsigniaParams) -> None:
        self.params = params
        self.rand = make_rng(params.seed)
        self.elements: list[Element] = []
        self._counter = 0

    def next_id(self, layer: str) -> str:
        self._counter += 1
        return f"{layer}-{self._counter}"

    def build(self) -> list[Element]:
        self._defs()
        self._rings()
        self._orbits()
        self._spokes()
        self._branches()
        self._curves()
        self._petals()
        self._accents()
        self._center()
        logger.debug(
            "Built scene seed=%08x with %d elements",
            self.params.seed,
            len(self.elements),
        )
        return self.elements

    # -------------------------
    # Layers
    # -------------------------

    def _defs(self) -> None:
        palette = self.params.palette
        self.elements.append(
            Element(
                id=self.next_id("defs"),
                type="defs",
                layer="defs",
                radial_gradient=RadialGradient(
                    id=GRADIENT_ID,
                    stops=(
                        GradientStop("0%", palette.background_inner),
                        GradientStop("100%", palette.background_outer),
                    ),
                ),
                blur_filter=BlurFilter(id=BLUR_ID, std_deviation=11),
            )
        )

    def _rings(self) -> None:
        p = self.params
        base_count = 3 + math.floor(p.detail_level)
        extra = math.floor(p.structure_level * 4)
        count = min(base_count + extra, MAX_RINGS)

        for i in range(count):
            t = i / max(count - 1, 1)
            wobble = (self.rand() - 0.5) * 6
            r = RADIUS_BASE + t * (RADIUS_MAX - RADIUS_BASE) + wobble
            self.elements.append(
                Element(
                    id=self.next_id("ring"),
                    type="ring",
                    layer="rings",
                    cx=CENTER,
                    cy=CENTER,
                    r=r,
                    stroke=p.palette.main1 if i % 2 == 0 else p.palette.main2,
                    stroke_width=5 + (1 - t) * 12 / p.symmetry,
                    opacity=0.18 + 0.32 * (1 - t),
                    blur=i % 3 == 0 and i > 0,
                )
            )

    def _orbits(self) -> None:
        count = 3 + math.floor(self.params.detail_level / 2)
        for i in range(count):
            t = (i + 1) / (count + 1)
            wobble = (self.rand() - 0.5) * 4
            r = RADIUS_BASE + 30 + t * (RADIUS_MAX - RADIUS_BASE - 60) + wobble
            self.elements.append(
                Element(
                    id=self.next_id("orbit"),
                    type="ring",
                    layer="orbits",
                    cx=CENTER,
                    cy=CENTER,
                    r=r,
                    stroke=self.params.palette.subtle,
                    stroke_width=0.9,
                    opacity=0.12,
                )
            )

    def _spokes(self) -> None:
        p = self.params
        density = 10 + math.floor(p.detail_level * 4)
        count = min(density * p.symmetry, MAX_SPOKES)
        base_len = 60 + p.detail_level * 10
        jitter = 26 + p.detail_level * 7
        inner_r = RADIUS_BASE - 16

        for i in range(count):
            angle = (i / count) * math.pi * 2
            length = base_len + (self.rand() - 0.5) * jitter
            x1, y1 = polar(inner_r, angle)
            x2, y2 = polar(inner_r + length, angle)
            self.elements.append(
                Element(
                    id=self.next_id("spoke"),
                    type="line",
                    layer="spokes",
                    x1=x1,
                    y1=y1,
                    x2=x2,
                    y2=y2,
                    stroke=p.palette.subtle,
                    stroke_width=1.1 + self.rand() * 2.1,
                    opacity=0.13 + 0.26 * (1 - p.curve_bias),
                )
            )

    def _branches(self) -> None:
        p = self.params
        depth = 2 + math.floor(p.detail_level / 2)
        length = 40 + p.detail_level * 6
        spread = math.pi / 6 + p.curve_bias * (math.pi / 12)

        for i in range(p.symmetry):
            angle = (i / p.symmetry) * math.pi * 2
            sx, sy = polar(RADIUS_BASE + 10, angle)
            self._branch(sx, sy, angle, length, depth, spread)

    def _branch(
        self, x: float, y: float, angle: float, length: float, depth: int, spread: float
    ) -> None:
        x2 = x + length * math.cos(angle)
        y2 = y + length * math.sin(angle)
        self.elements.append(
            Element(
                id=self.next_id("branch"),
                type="line",
                layer="branches",
                x1=x,
                y1=y,
                x2=x2,
                y2=y2,
                stroke=self.params.palette.subtle,
                stroke_width=max(0.8, 2.6 - depth * 0.6),
                opacity=0.18 + 0.12 * depth,
            )
        )
        if depth <= 0:
            return

        shrink = 0.68 + self.rand() * 0.12
        delta = spread * (0.75 + self.rand() * 0.4)
        self._branch(x2, y2, angle + delta, length * shrink, depth - 1, spread)
        self._branch(x2, y2, angle - delta, length * shrink, depth - 1, spread)

    def _curves(self) -> None:
        p = self.params
        groups = 2 + math.floor(p.curve_bias * 4)

        for g in range(groups):
            base_angle = self.rand() * math.pi * 2
            band_radius = (
                RADIUS_BASE + 40 + self.rand() * (RADIUS_MAX - RADIUS_BASE - 120)
            )
            band_width = 18 + self.rand() * 32

            pts = []
            for i in range(CURVE_SEGMENTS + 1):
                tt = i / CURVE_SEGMENTS
                angle = base_angle + (tt - 0.5) * (math.pi * 1.7)
                wobble = math.sin(tt * math.pi * 4 + g) * 16 * p.curve_bias
                pts.append(polar(band_radius + wobble, angle))

            self.elements.append(
                Element(
                    id=self.next_id("curve"),
                    type="path",
                    layer="curves",
                    d=path_data(pts),
                    stroke=p.palette.main3,
                    stroke_width=band_width / 11,
                    opacity=0.2 + 0.18 * p.curve_bias,
                    fill="none",
                )
            )

    def _petals(self) -> None:
        p = self.params
        count = p.symmetry * 2
        size = 40 + p.detail_level * 2

        for i in range(count):
            angle = (i / count) * math.pi * 2
            cx, cy = polar(PETAL_RADIUS, angle)
            self.elements.append(
                Element(
                    id=self.next_id("petal"),
                    type="polygon",
                    layer="petals",
                    points=petal_points(cx, cy, angle, size),
                    fill=p.palette.main1,
                    opacity=0.4,
                )
            )

    def _accents(self) -> None:
        p = self.params
        count = min(p.accent_level * 3, MAX_ACCENTS)

        for _ in range(count):
            ring_t = self.rand()
            r = RADIUS_BASE + 30 + ring_t * (RADIUS_MAX - RADIUS_BASE - 80)
            angle = self.rand() * math.pi * 2
            cx, cy = polar(r, angle)
            size = 6 + self.rand() * 14
            rot = self.rand() * math.pi * 2

            pts = tuple(
                polar(size, rot + k * (math.pi * 2 / 3), cx, cy) for k in range(3)
            )
            self.elements.append(
                Element(
                    id=self.next_id("accent"),
                    type="polygon",
                    layer="accents",
                    points=pts,
                    fill=p.palette.highlight,
                    opacity=0.6,
                )
            )

    def _center(self) -> None:
        p = self.params
        self.elements.append(
            Element(
                id=self.next_id("core-bg"),
                type="circle",
                layer="core-bg",
                cx=CENTER,
                cy=CENTER,
                r=88,
                fill=f"url(#{GRADIENT_ID})",
                opacity=0.96,
                blur=True,
            )
        )
        rings = ((76, p.palette.main1, 3.8), (60, p.palette.main2, 2.4))
        for r, stroke, width in rings:
            self.elements.append(
                Element(
                    id=self.next_id("center"),
                    type="circle",
                    layer="center",
                    cx=CENTER,
                    cy=CENTER,
                    r=r,
                    stroke=stroke,
                    stroke_width=width,
                    fill="none",
                    opacity=0.96,
                )
            )

        sides = CENTER_SIDES[p.layout_mode]
        rot = math.pi / sides
        pts = tuple(polar(36, rot + i * (math.pi * 2 / sides)) for i in range(sides))
        self.elements.append(
            Element(
                id=self.next_id("center"),
                type="polygon",
                layer="center",
                points=pts,
                fill=p.palette.subtle,
                opacity=0.96,
            )
        )

        self.elements.append(
            Element(
                id=self.next_id("center-dot"),
                type="circle",
                layer="center",
                cx=CENTER,
                cy=CENTER,
                r=8 + p.curve_bias * 12,
                fill=p.palette.highlight,
                opacity=0.98,
            )
        )


def build_scene(params: InsigniaParams) -> list[Element]:
    return SceneBuilder(params).build()
