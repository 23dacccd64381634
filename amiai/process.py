"""Process introspection and the ancestor-chain walk.

``psutil`` is the process backend on every platform.  All of its failure
modes (process exited mid-walk, permission denied, zombies) are folded into
``None`` here so callers only ever see "unknown", never an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol

import psutil

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 10

_TOP_PIDS = frozenset({0, 1})

_PSUTIL_ERRORS = (psutil.NoSuchProcess, psutil.ZombieProcess, psutil.AccessDenied)


@dataclass(frozen=True)
class ProcessInfo:
    """One ancestor as seen by the walker."""

    pid: int
    name: str = ""
    cmdline: str = ""


class ProcessInspector(Protocol):
    """What the walker needs from the OS."""

    def parent_pid(self, pid: int) -> int | None: ...

    def names(self, pid: int) -> ProcessInfo | None: ...


class PsutilInspector:
    """:class:`ProcessInspector` backed by ``psutil``."""

    def parent_pid(self, pid: int) -> int | None:
        try:
            return psutil.Process(pid).ppid()
        except _PSUTIL_ERRORS:
            return None
        except ValueError:
            # negative pid
            return None

    def names(self, pid: int) -> ProcessInfo | None:
        try:
            proc = psutil.Process(pid)
        except (*_PSUTIL_ERRORS, ValueError):
            return None

        name = ""
        cmdline = ""
        try:
            name = proc.name() or ""
        except _PSUTIL_ERRORS:
            pass
        try:
            cmdline = " ".join(proc.cmdline())
        except _PSUTIL_ERRORS:
            pass

        if not name and not cmdline:
            return None
        return ProcessInfo(pid=pid, name=name, cmdline=cmdline)


def iter_ancestors(
    pid: int,
    inspector: ProcessInspector,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Iterator[ProcessInfo]:
    """Yield ancestors of *pid*, closest first, at most *max_depth* of them.

    The walk ends at init/the kernel (pid 1 or 0) or as soon as a parent pid
    cannot be resolved.  Ancestors whose names are unreadable are yielded as
    bare :class:`ProcessInfo` records so the depth count stays honest.
    """
    current = pid
    for depth in range(max_depth):
        parent = inspector.parent_pid(current)
        if parent is None or parent in _TOP_PIDS:
            logger.debug("Reached top of process tree at depth %d", depth)
            return

        logger.debug("Checking PID %d at depth %d", parent, depth)
        info = inspector.names(parent)
        yield info if info is not None else ProcessInfo(pid=parent)
        current = parent


def parent_name(pid: int, inspector: ProcessInspector) -> str:
    """Lowercased short name of *pid*'s immediate parent, or ``""``."""
    parent = inspector.parent_pid(pid)
    if parent is None:
        return ""
    info = inspector.names(parent)
    if info is None:
        return ""
    return info.name.lower()
