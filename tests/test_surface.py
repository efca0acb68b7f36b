"""Tests for surface.py — staggered transitions on the headless surface."""

import pytest

from glyphseed.elements import Element
from glyphseed.surface import (
    MAX_DELAY_SHARE,
    RenderTiming,
    SceneSurface,
    render_diff,
    render_full,
    stagger,
)


def dot(element_id):
    return Element(id=element_id, type="circle", layer="accents", cx=1, cy=1, r=1)


def scene(*ids):
    return [dot(i) for i in ids]


# ==================== stagger ====================


class TestStagger:
    def test_delays_step_by_piece_stagger(self):
        out = stagger(["a", "b", "c"], "enter", RenderTiming(1000, 30))
        assert [t.delay_ms for t in out] == [0, 30, 60]
        assert [t.duration_ms for t in out] == [1000, 970, 940]
        assert {t.kind for t in out} == {"enter"}

    def test_delay_is_capped(self):
        timing = RenderTiming(550, 18)
        out = stagger([str(i) for i in range(100)], "exit", timing)
        cap = 550 * MAX_DELAY_SHARE
        assert max(t.delay_ms for t in out) == pytest.approx(cap)
        assert all(t.duration_ms >= 550 - cap - 1e-9 for t in out)

    def test_empty(self):
        assert stagger([], "enter", RenderTiming()) == []


# ==================== render_full / render_diff ====================


class TestRender:
    def test_full_render_replaces_everything(self, surface):
        render_full(surface, scene("a", "b"), RenderTiming())
        render_full(surface, scene("c"), RenderTiming())
        assert list(surface.nodes) == ["c"]
        assert surface.placeholder is False
        assert surface.renders == 2

    def test_diff_enters_added_and_exits_removed(self, surface):
        timing = RenderTiming(700, 25)
        render_full(surface, scene("a", "b"), timing)
        diff = render_diff(surface, scene("a", "b"), scene("b", "c"), timing)

        assert diff.removed_ids == {"a"}
        assert [(t.element_id, t.kind) for t in surface.transitions] == [
            ("a", "exit"),
            ("c", "enter"),
        ]
        # the exiting node is still painted until the next render settles it
        assert "a" in surface.nodes
        assert surface.visible_ids == ["b", "c"]

    def test_next_diff_settles_previous_exits(self, surface):
        timing = RenderTiming(700, 25)
        render_full(surface, scene("a", "b"), timing)
        render_diff(surface, scene("a", "b"), scene("b"), timing)
        render_diff(surface, scene("b"), scene("b", "d"), timing)
        assert list(surface.nodes) == ["b", "d"]
        assert surface.exiting == set()

    def test_untouched_nodes_are_not_animated(self, surface):
        timing = RenderTiming()
        render_full(surface, scene("a", "b", "c"), timing)
        render_diff(surface, scene("a", "b", "c"), scene("a", "b", "c", "x"), timing)
        assert [t.element_id for t in surface.transitions] == ["x"]

    def test_clear_shows_placeholder(self, surface):
        render_full(surface, scene("a"), RenderTiming())
        surface.clear()
        assert surface.nodes == {}
        assert surface.transitions == []
        assert surface.placeholder is True

    def test_settle_without_exits(self):
        surface = SceneSurface(nodes={"a": dot("a")})
        surface.settle()
        assert list(surface.nodes) == ["a"]
