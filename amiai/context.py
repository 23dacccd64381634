"""Per-call detection state."""

from __future__ import annotations

import os
from collections.abc import Mapping
from functools import cached_property

from amiai.process import (
    DEFAULT_MAX_DEPTH,
    ProcessInfo,
    ProcessInspector,
    PsutilInspector,
    iter_ancestors,
    parent_name,
)


class DetectionContext:
    """Snapshot of everything one detection call looks at.

    The environment is copied once at construction.  The ancestor chain and
    the immediate parent's name are resolved on first use, so an
    environment-only scan never touches the process table.  Instances are
    never reused across calls.
    """

    def __init__(
        self,
        *,
        env: Mapping[str, str] | None = None,
        pid: int | None = None,
        inspector: ProcessInspector | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.env: dict[str, str] = dict(os.environ if env is None else env)
        self.pid = os.getpid() if pid is None else pid
        self.inspector: ProcessInspector = inspector or PsutilInspector()
        self.max_depth = max_depth

    @cached_property
    def ancestors(self) -> tuple[ProcessInfo, ...]:
        return tuple(iter_ancestors(self.pid, self.inspector, self.max_depth))

    @cached_property
    def parent_name(self) -> str:
        return parent_name(self.pid, self.inspector)
