"""
Headless render surface.

Stands in for a visual front-end: it keeps the elements currently shown and
records the staggered enter/exit transitions a renderer would animate. The
engine never waits on these transitions.
"""

import logging
from dataclasses import dataclass, field

from glyphseed.elements import Element
from glyphseed.reconcile import SceneDiff, diff_scenes

logger = logging.getLogger(__name__)

# share of the total duration over which piece starts are spread
MAX_DELAY_SHARE = 0.6


@dataclass(frozen=True)
class RenderTiming:
    total_duration: int = 3000
    piece_stagger: int = 30


@dataclass(frozen=True)
class Transition:
    element_id: str
    kind: str  # "enter" or "exit"
    delay_ms: float
    duration_ms: float


def stagger(ids: list[str], kind: str, timing: RenderTiming) -> list[Transition]:
    max_delay = timing.total_duration * MAX_DELAY_SHARE
    out = []
    for i, element_id in enumerate(ids):
        delay = min(i * timing.piece_stagger, max_delay)
        out.append(Transition(element_id, kind, delay, timing.total_duration - delay))
    return out


@dataclass
class SceneSurface:
    """Host surface: shown nodes keyed by id, in paint order."""

    nodes: dict[str, Element] = field(default_factory=dict)
    exiting: set[str] = field(default_factory=set)
    transitions: list[Transition] = field(default_factory=list)
    placeholder: bool = True
    renders: int = 0

    def clear(self) -> None:
        self.nodes.clear()
        self.exiting.clear()
        self.transitions = []
        self.placeholder = True

    def settle(self) -> None:
        """Drop nodes whose exit transitions have finished."""
        for element_id in self.exiting:
            self.nodes.pop(element_id, None)
        self.exiting.clear()

    @property
    def visible_ids(self) -> list[str]:
        return [i for i in self.nodes if i not in self.exiting]


def render_full(
    surface: SceneSurface, elements: list[Element], timing: RenderTiming
) -> None:
    surface.clear()
    surface.placeholder = False
    surface.nodes = {el.id: el for el in elements}
    surface.transitions = stagger(list(surface.nodes), "enter", timing)
    surface.renders += 1
    logger.debug("Full render of %d elements", len(elements))


def render_diff(
    surface: SceneSurface,
    old: list[Element],
    new: list[Element],
    timing: RenderTiming,
) -> SceneDiff:
    """Animate only what changed between old and new; untouched nodes stay."""
    diff = diff_scenes(old, new)

    # a newer edit supersedes exits still in flight
    surface.settle()
    surface.placeholder = False

    removed = [el.id for el in old if el.id in diff.removed_ids]
    added = [el.id for el in diff.added]
    surface.exiting.update(removed)
    for el in diff.added:
        surface.nodes[el.id] = el

    surface.transitions = stagger(removed, "exit", timing) + stagger(
        added, "enter", timing
    )
    surface.renders += 1
    logger.debug("Diff render: +%d -%d", len(added), len(removed))
    return diff
