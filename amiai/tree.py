"""Phase 2: process-tree fingerprints."""

from __future__ import annotations

import logging

from amiai.context import DetectionContext
from amiai.disambiguate import classify_host_session
from amiai.registry import all_tools

logger = logging.getLogger(__name__)


def scan_process_tree(context: DetectionContext) -> frozenset[str]:
    """Return the ids of every tool whose pattern matches some ancestor.

    Each ancestor's short name and full command line are both tested.  A
    host-tool hit is kept only if the shared host classification accepts it,
    judged on the *immediate* parent rather than the matching ancestor.
    """
    logger.debug("Starting process tree detection from PID %d", context.pid)
    detected: set[str] = set()
    for depth, ancestor in enumerate(context.ancestors):
        for tool in all_tools():
            if tool.id in detected:
                continue
            if not tool.matches_process(ancestor.name, ancestor.cmdline):
                continue
            if tool.requires_disambiguation and not classify_host_session(
                context.env, context.parent_name
            ):
                logger.debug("%s in tree at depth %d rejected as human session", tool.id, depth)
                continue
            logger.debug("Detected %s in process tree at depth %d", tool.id, depth)
            detected.add(tool.id)
    return frozenset(detected)
