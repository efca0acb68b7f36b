"""Scene data model: elements, palettes and the parameter bundle."""

from dataclasses import asdict, dataclass
from typing import Tuple

Point = Tuple[float, float]

CANVAS_SIZE = 1000
CENTER = 500

ELEMENT_TYPES = ("circle", "line", "path", "polygon", "ring", "defs")


# -------------------------
# Defs descriptors
# -------------------------


@dataclass(frozen=True)
class GradientStop:
    offset: str
    color: str
    opacity: float = 1.0


@dataclass(frozen=True)
class RadialGradient:
    id: str
    stops: Tuple[GradientStop, ...]
    cx: str = "50%"
    cy: str = "50%"
    r: str = "70%"
    fx: str = "50%"
    fy: str = "34%"


@dataclass(frozen=True)
class BlurFilter:
    id: str
    std_deviation: float


# -------------------------
# Elements
# -------------------------


@dataclass(frozen=True)
class Element:
    """
    One visual element of a scene.

    The id is the reconciliation key: it is assigned once and the element is
    frozen, so a persisting id always refers to the same geometry.
    """

    id: str
    type: str
    layer: str = ""

    # circle / ring
    cx: float | None = None
    cy: float | None = None
    r: float | None = None

    # line
    x1: float | None = None
    y1: float | None = None
    x2: float | None = None
    y2: float | None = None

    # path / polygon
    d: str | None = None
    points: Tuple[Point, ...] | None = None

    stroke: str | None = None
    fill: str | None = None
    stroke_width: float | None = None
    opacity: float | None = None
    blur: bool = False

    radial_gradient: RadialGradient | None = None
    blur_filter: BlurFilter | None = None

    def to_dict(self) -> dict:
        data = asdict(self)
        if data["points"] is not None:
            data["points"] = [list(p) for p in data["points"]]
        return {k: v for k, v in data.items() if v is not None}


# -------------------------
# Parameter bundle
# -------------------------


@dataclass(frozen=True)
class Palette:
    main1: str
    main2: str
    main3: str
    subtle: str
    highlight: str
    background_inner: str
    background_outer: str


@dataclass(frozen=True)
class InsigniaParams:
    seed: int
    palette: Palette
    symmetry: int = 6
    detail_level: float = 2.0
    structure_level: float = 0.5
    curve_bias: float = 0.5
    accent_level: int = 4
    layout_mode: int = 0
    palette_mode: str = "auto"
