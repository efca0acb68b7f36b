"""
Shared fixtures for the glyphseed test suite.

A fixed parameter bundle keeps scene counts predictable; sessions get their
own surface so tests can inspect what was rendered.
"""

import pytest

from glyphseed.elements import InsigniaParams, Palette
from glyphseed.live import LiveSession
from glyphseed.strokes import LiveIds
from glyphseed.surface import SceneSurface


@pytest.fixture
def palette():
    return Palette(
        main1="#e07a5f",
        main2="#3d405b",
        main3="#81b29a",
        subtle="#f4f1de",
        highlight="#f2cc8f",
        background_inner="#1d1f2b",
        background_outer="#07080c",
    )


@pytest.fixture
def params(palette):
    """symmetry 6, detail 2.0, structure 0.5, curve 0.5, accents 4, square core."""
    return InsigniaParams(
        seed=0xC0FFEE,
        palette=palette,
        symmetry=6,
        detail_level=2.0,
        structure_level=0.5,
        curve_bias=0.5,
        accent_level=4,
        layout_mode=0,
    )


@pytest.fixture
def ids():
    return LiveIds()


@pytest.fixture
def surface():
    return SceneSurface()


@pytest.fixture
def session(surface, monkeypatch):
    monkeypatch.delenv("GLYPHSEED_PALETTE", raising=False)
    return LiveSession(surface=surface)
