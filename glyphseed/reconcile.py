"""Id-keyed reconciliation between two scene snapshots."""

from dataclasses import dataclass, field
from typing import Iterable

from glyphseed.elements import Element


@dataclass(frozen=True)
class SceneDiff:
    added: list[Element] = field(default_factory=list)
    removed_ids: frozenset[str] = frozenset()

    @property
    def empty(self) -> bool:
        return not self.added and not self.removed_ids


def diff_scenes(old: Iterable[Element], new: Iterable[Element]) -> SceneDiff:
    """
    Compare two element lists by id only.

    Element content is never compared: an id present in both lists counts as
    unchanged even if its fields differ. ``added`` keeps the order of ``new``.
    """
    new = list(new)
    old_ids = {el.id for el in old}
    new_ids = {el.id for el in new}
    return SceneDiff(
        added=[el for el in new if el.id not in old_ids],
        removed_ids=frozenset(old_ids - new_ids),
    )
