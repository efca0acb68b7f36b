"""
Live incremental insignia session.

A session keeps the current text, the scene grown from it and, per character
index, the element ids that character contributed. Each text change is
classified as an append, a truncation from the end or anything else:
appends grow one stroke per new character on top of the scene, truncations
prune exactly the strokes of the dropped characters, and every other edit
regrows the whole scene from scratch.

Appending characters one by one does NOT reproduce a full rebuild of the
same text: live strokes draw from the running hash, the rebuild from the
text seed.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from glyphseed.config import AppConfig
from glyphseed.elements import Element, InsigniaParams
from glyphseed.params import build_params_from_text
from glyphseed.rng import LIVE_HASH_SEED
from glyphseed.scene_builder import build_scene
from glyphseed.strokes import LiveIds, apply_char_rule
from glyphseed.surface import RenderTiming, SceneSurface, render_diff, render_full
from glyphseed.svg_export import scene_to_svg_string

logger = logging.getLogger(__name__)


class EditKind(Enum):
    CLEAR = "clear"
    REBUILD = "rebuild"
    UNCHANGED = "unchanged"
    APPEND = "append"
    TRUNCATE = "truncate"


@dataclass
class LiveSceneState:
    initialised: bool = False
    text: str = ""
    params_base: InsigniaParams | None = None
    elements: list[Element] = field(default_factory=list)
    char_elements: list[list[str]] = field(default_factory=list)
    live_hash: int = LIVE_HASH_SEED

    def clear(self) -> None:
        self.initialised = False
        self.text = ""
        self.params_base = None
        self.elements = []
        self.char_elements = []
        self.live_hash = LIVE_HASH_SEED

    def reset(self, text: str, params: InsigniaParams, elements: list[Element]) -> None:
        """Seed the state from a full build; incremental history starts empty."""
        self.initialised = True
        self.text = text
        self.params_base = params
        self.elements = list(elements)
        self.char_elements = [[] for _ in text]
        self.live_hash = LIVE_HASH_SEED


class LiveSession:
    """Owns one LiveSceneState and the surface its diffs are rendered to."""

    def __init__(
        self,
        surface: SceneSurface | None = None,
        config: AppConfig | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.surface = surface if surface is not None else SceneSurface()
        self.state = LiveSceneState()
        self.palette_mode = self.config.style.palette_mode
        self.last_edit: EditKind | None = None
        self.status = ""
        self.status_error = False
        self._ids = LiveIds()

    # -------------------------
    # Status
    # -------------------------

    def _set_status(self, message: str, is_error: bool = False) -> None:
        self.status = message
        self.status_error = is_error
        if message:
            log = logger.warning if is_error else logger.info
            log(message)

    # -------------------------
    # Full builds
    # -------------------------

    def _clear(self) -> None:
        self.surface.clear()
        self.state.clear()
        self._set_status("")
        self.last_edit = EditKind.CLEAR

    def _rebuild(self, text: str, palette_mode: str, timing: RenderTiming) -> None:
        params = build_params_from_text(text, palette_mode)
        scene = build_scene(params)
        render_full(self.surface, scene, timing)
        self.state.reset(text, params, scene)
        self.palette_mode = palette_mode
        self.last_edit = EditKind.REBUILD
        self._set_status("Insignia grown. Use SVG or PNG to export.")

    def generate(self, text: str, palette_mode: str | None = None) -> None:
        """Grow an insignia for the whole text, discarding live history."""
        trimmed = text.strip()
        if not trimmed:
            self._set_status("Add some text first to grow an insignia.", is_error=True)
            return
        self._set_status("Growing...")
        mode = palette_mode or self.palette_mode
        self._rebuild(trimmed, mode, self.config.timing.grow)

    # -------------------------
    # Live edits
    # -------------------------

    def on_text_change(self, raw_text: str, palette_mode: str | None = None) -> None:
        mode = palette_mode or self.palette_mode
        trimmed = raw_text.strip()
        state = self.state

        if not trimmed:
            self._clear()
            return

        if not state.initialised or state.params_base is None:
            self._set_status("Growing...")
            self._rebuild(trimmed, mode, self.config.timing.first_growth)
            return

        if trimmed == state.text:
            self.last_edit = EditKind.UNCHANGED
            return

        if trimmed.startswith(state.text):
            self._append(trimmed)
            return

        if state.text.startswith(trimmed):
            self._truncate(trimmed)
            return

        self._set_status("Re-growing...")
        self._rebuild(trimmed, mode, self.config.timing.regrow)

    def _append(self, text: str) -> None:
        state = self.state
        start = len(state.text)
        additions: list[Element] = []
        char_elements = list(state.char_elements)
        live_hash = state.live_hash

        for offset, ch in enumerate(text[start:]):
            index = start + offset
            live_hash, strokes = apply_char_rule(
                ch, index, state.params_base, live_hash, self._ids
            )
            additions.extend(strokes)
            char_elements.append([el.id for el in strokes])

        new_elements = state.elements + additions
        timing = self.config.timing.typing
        render_diff(self.surface, state.elements, new_elements, timing)

        state.elements = new_elements
        state.char_elements = char_elements
        state.text = text
        state.live_hash = live_hash
        self.last_edit = EditKind.APPEND
        logger.debug(
            "Appended %d chars, %d elements", len(text) - start, len(additions)
        )
        self._set_status("Typing growth active.")

    def _truncate(self, text: str) -> None:
        state = self.state
        keep = len(text)
        drop_ids = {i for slot in state.char_elements[keep:] for i in slot}

        new_elements = [el for el in state.elements if el.id not in drop_ids]
        timing = self.config.timing.pruning
        render_diff(self.surface, state.elements, new_elements, timing)

        state.elements = new_elements
        state.char_elements = state.char_elements[:keep]
        state.text = text
        self.last_edit = EditKind.TRUNCATE
        logger.debug("Pruned %d elements", len(drop_ids))
        self._set_status("Pruning strokes.")

    # -------------------------
    # Export
    # -------------------------

    def export_svg(self) -> str:
        if not self.state.initialised:
            return ""
        return scene_to_svg_string(self.state.elements, self.config.export.svg_size)
