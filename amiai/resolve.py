"""Merge phase results and apply the fixed priority order."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from amiai.registry import NONE, PRIORITY


@dataclass(frozen=True)
class Resolution:
    primary: str
    matches: tuple[str, ...]

    @property
    def is_ai(self) -> bool:
        return self.primary != NONE


def order_by_priority(tool_ids: Iterable[str]) -> tuple[str, ...]:
    """Deduplicate *tool_ids* and sort them by :data:`PRIORITY`.

    Ids that are not in the priority list are dropped.
    """
    present = set(tool_ids)
    return tuple(tool_id for tool_id in PRIORITY if tool_id in present)


def resolve(env_matches: Iterable[str], tree_matches: Iterable[str]) -> Resolution:
    matches = order_by_priority({*env_matches, *tree_matches})
    return Resolution(primary=matches[0] if matches else NONE, matches=matches)
