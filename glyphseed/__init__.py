"""Grow deterministic vector insignias from text, incrementally as it is typed."""

from glyphseed.elements import Element, InsigniaParams, Palette
from glyphseed.live import EditKind, LiveSceneState, LiveSession
from glyphseed.params import build_params_from_text
from glyphseed.reconcile import SceneDiff, diff_scenes
from glyphseed.rng import make_rng, step_hash
from glyphseed.scene_builder import build_scene
from glyphseed.svg_export import scene_to_svg_string

__version__ = "0.3.0"

__all__ = [
    "EditKind",
    "Element",
    "InsigniaParams",
    "LiveSceneState",
    "LiveSession",
    "Palette",
    "SceneDiff",
    "build_params_from_text",
    "build_scene",
    "diff_scenes",
    "make_rng",
    "scene_to_svg_string",
    "step_hash",
]
