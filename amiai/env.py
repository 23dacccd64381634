"""Phase 1: environment-variable fingerprints."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from amiai.disambiguate import classify_host_session
from amiai.registry import all_tools

logger = logging.getLogger(__name__)


def scan_environment(
    env: Mapping[str, str],
    parent_name: Callable[[], str] | None = None,
) -> frozenset[str]:
    """Return the ids of every tool whose environment predicate holds.

    Tools that need disambiguation are only kept if
    :func:`~amiai.disambiguate.classify_host_session` accepts them.
    *parent_name* is called at most once, and only in that case; without it
    the parent is treated as unknown.
    """
    detected: set[str] = set()
    parent: str | None = None
    for tool in all_tools():
        if not tool.matches_env(env):
            continue
        if tool.requires_disambiguation:
            if parent is None:
                parent = parent_name() if parent_name is not None else ""
            if not classify_host_session(env, parent):
                logger.debug("%s environment marker rejected as human session", tool.id)
                continue
        logger.debug("Detected %s via environment variable", tool.id)
        detected.add(tool.id)
    return frozenset(detected)
