"""Shared test fixtures for am-i-ai tests."""

from __future__ import annotations

import logging

import pytest
from typer.testing import CliRunner

from amiai.log import LOGGER_NAME
from amiai.process import ProcessInfo

SELF_PID = 4242


class FakeInspector:
    """In-memory process table: ``{pid: (ppid, name, cmdline)}``.

    ``None`` for name and cmdline means the process exists but is unreadable.
    """

    def __init__(self, table: dict[int, tuple[int, str | None, str | None]]) -> None:
        self.table = table
        self.parent_queries: list[int] = []

    def parent_pid(self, pid: int) -> int | None:
        self.parent_queries.append(pid)
        entry = self.table.get(pid)
        return entry[0] if entry else None

    def names(self, pid: int) -> ProcessInfo | None:
        entry = self.table.get(pid)
        if entry is None or (entry[1] is None and entry[2] is None):
            return None
        return ProcessInfo(pid=pid, name=entry[1] or "", cmdline=entry[2] or "")


def make_chain(*ancestors: tuple[str, str], top: int = 1) -> FakeInspector:
    """Build a tree where :data:`SELF_PID`'s ancestors are *ancestors*.

    Ancestors are ``(name, cmdline)`` pairs, closest first; the last one's
    parent is *top*.
    """
    table: dict[int, tuple[int, str | None, str | None]] = {}
    pid = SELF_PID
    table[pid] = (pid + 1 if ancestors else top, "python3", "python3 -m amiai")
    for offset, (name, cmdline) in enumerate(ancestors, start=1):
        child = SELF_PID + offset
        parent = child + 1 if offset < len(ancestors) else top
        table[child] = (parent, name, cmdline)
    return FakeInspector(table)


@pytest.fixture
def runner() -> CliRunner:
    """Provide a CLI test runner."""
    return CliRunner()


@pytest.fixture
def human_tree() -> FakeInspector:
    """Terminal emulator -> login shell -> us."""
    return make_chain(("zsh", "-zsh"), ("login", "login -pf user"), ("iTerm2", "/Applications/iTerm.app"))


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI attached so streams from one test never leak into the next."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
