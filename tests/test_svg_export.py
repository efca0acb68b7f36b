"""Tests for svg_export.py — svgwrite serialisation of scenes."""

import xml.etree.ElementTree as ET

import pytest

from glyphseed.elements import Element
from glyphseed.scene_builder import BLUR_ID, GRADIENT_ID, build_scene
from glyphseed.svg_export import (
    FALLBACK_BACKGROUND,
    build_drawing,
    scene_to_svg_string,
    write_svg,
)

NS = "{http://www.w3.org/2000/svg}"


def parse(svg: str) -> ET.Element:
    return ET.fromstring(svg)


def by_id(root: ET.Element) -> dict:
    return {node.get("id"): node for node in root.iter() if node.get("id")}


class TestSceneToSvg:
    def test_document_shape(self, params):
        root = parse(scene_to_svg_string(build_scene(params)))
        assert root.tag == f"{NS}svg"
        assert root.get("viewBox") == "0,0,1000,1000"
        assert root.get("width") == "1000"

    def test_every_element_is_emitted_with_its_id(self, params):
        scene = build_scene(params)
        nodes = by_id(parse(scene_to_svg_string(scene)))
        for el in scene:
            if el.type != "defs":
                assert el.id in nodes
                assert nodes[el.id].get("class") == el.layer

    def test_defs_and_background(self, params):
        root = parse(scene_to_svg_string(build_scene(params)))
        nodes = by_id(root)
        gradient = nodes[GRADIENT_ID]
        assert gradient.tag == f"{NS}radialGradient"
        assert len(gradient.findall(f"{NS}stop")) == 2
        assert nodes[BLUR_ID].find(f"{NS}feGaussianBlur") is not None

        background = root.find(f"{NS}rect")
        assert background.get("fill") == f"url(#{GRADIENT_ID})"

    def test_blurred_elements_reference_filter(self, params):
        scene = build_scene(params)
        nodes = by_id(parse(scene_to_svg_string(scene)))
        blurred = [el.id for el in scene if el.blur]
        assert blurred
        for element_id in blurred:
            assert nodes[element_id].get("filter") == f"url(#{BLUR_ID})"

    def test_rings_are_unfilled_circles(self, params):
        scene = build_scene(params)
        nodes = by_id(parse(scene_to_svg_string(scene)))
        ring = next(el for el in scene if el.type == "ring")
        assert nodes[ring.id].tag == f"{NS}circle"
        assert nodes[ring.id].get("fill") == "none"

    def test_no_defs_uses_fallback_background(self):
        scene = [Element(id="a-1", type="circle", layer="accents", cx=1, cy=2, r=3)]
        root = parse(scene_to_svg_string(scene))
        assert root.find(f"{NS}rect").get("fill") == FALLBACK_BACKGROUND

    def test_size_changes_only_the_outer_box(self, params):
        root = parse(scene_to_svg_string(build_scene(params), size=512))
        assert root.get("width") == "512"
        assert root.get("viewBox") == "0,0,1000,1000"

    def test_unsupported_type(self):
        with pytest.raises(ValueError, match="Unsupported element type"):
            build_drawing([Element(id="x-1", type="ellipse")])


class TestWriteSvg:
    def test_writes_file(self, params, tmp_path):
        out = write_svg(build_scene(params), tmp_path / "scene.svg")
        assert out.exists()
        assert parse(out.read_text()).tag == f"{NS}svg"
