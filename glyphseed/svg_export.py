"""Serialise a scene element list to an SVG document."""

import logging
from pathlib import Path

import svgwrite

from glyphseed.elements import CANVAS_SIZE, Element

logger = logging.getLogger(__name__)

FALLBACK_BACKGROUND = "#05060a"


def _offset(value: str) -> float:
    if value.endswith("%"):
        return float(value[:-1]) / 100
    return float(value)


def _style(el: Element) -> dict:
    attrs: dict = {"id": el.id}
    if el.layer:
        attrs["class_"] = el.layer
    if el.stroke is not None:
        attrs["stroke"] = el.stroke
    if el.stroke_width is not None:
        attrs["stroke_width"] = round(el.stroke_width, 3)
    if el.fill is not None:
        attrs["fill"] = el.fill
    if el.opacity is not None:
        attrs["opacity"] = round(el.opacity, 3)
    return attrs


def _add_defs(dwg: svgwrite.Drawing, el: Element) -> None:
    grad = el.radial_gradient
    if grad is not None:
        gradient = dwg.radialGradient(
            id=grad.id,
            center=(grad.cx, grad.cy),
            r=grad.r,
            focal=(grad.fx, grad.fy),
        )
        for stop in grad.stops:
            gradient.add_stop_color(_offset(stop.offset), stop.color, stop.opacity)
        dwg.defs.add(gradient)

    blur = el.blur_filter
    if blur is not None:
        flt = dwg.filter(id=blur.id)
        flt.feGaussianBlur(in_="SourceGraphic", stdDeviation=blur.std_deviation)
        dwg.defs.add(flt)


def _shape(dwg: svgwrite.Drawing, el: Element, blur_id: str | None):
    attrs = _style(el)
    if el.blur and blur_id is not None:
        attrs["filter"] = f"url(#{blur_id})"

    if el.type == "ring":
        attrs.setdefault("fill", "none")
        return dwg.circle(center=(el.cx, el.cy), r=el.r, **attrs)
    if el.type == "circle":
        return dwg.circle(center=(el.cx, el.cy), r=el.r, **attrs)
    if el.type == "line":
        return dwg.line(start=(el.x1, el.y1), end=(el.x2, el.y2), **attrs)
    if el.type == "path":
        return dwg.path(d=el.d, **attrs)
    if el.type == "polygon":
        return dwg.polygon([(round(x, 3), round(y, 3)) for x, y in el.points], **attrs)
    raise ValueError(f"Unsupported element type: {el.type!r}")


def build_drawing(
    elements: list[Element], size: int = CANVAS_SIZE, filename: str = "noname.svg"
) -> svgwrite.Drawing:
    dwg = svgwrite.Drawing(filename, size=(size, size))
    dwg.viewbox(0, 0, CANVAS_SIZE, CANVAS_SIZE)

    defs = [el for el in elements if el.type == "defs"]
    for el in defs:
        _add_defs(dwg, el)

    gradient_id = next(
        (el.radial_gradient.id for el in defs if el.radial_gradient is not None), None
    )
    blur_id = next(
        (el.blur_filter.id for el in defs if el.blur_filter is not None), None
    )
    background = f"url(#{gradient_id})" if gradient_id else FALLBACK_BACKGROUND
    dwg.add(dwg.rect(insert=(0, 0), size=("100%", "100%"), fill=background))

    for el in elements:
        if el.type == "defs":
            continue
        dwg.add(_shape(dwg, el, blur_id))
    return dwg


def scene_to_svg_string(elements: list[Element], size: int = CANVAS_SIZE) -> str:
    return build_drawing(elements, size).tostring()


def write_svg(elements: list[Element], out_file: Path, size: int = CANVAS_SIZE) -> Path:
    dwg = build_drawing(elements, size, str(out_file))
    dwg.save()
    logger.debug("Saved %d elements to %s", len(elements), out_file)
    return out_file
