"""Public detection API.

Determines whether the current process is being driven by a known AI coding
agent.  Two independent phases feed one resolver:

    1. Environment variables - agents export markers into the shells they run.
    2. Process tree          - agent binaries show up among our ancestors.

Host applications that mark human terminals too (Zed) go through a shared
disambiguation rule in both phases.  When several tools match, the fixed
order in :data:`amiai.registry.PRIORITY` picks the winner.

Every call builds a fresh :class:`~amiai.context.DetectionContext`; nothing
is cached between calls.  All functions accept the keyword overrides
``env``, ``pid``, ``inspector`` and ``max_depth`` so embedders and tests can
supply their own snapshot.

Public API
----------
detect()                  -> str              # "claude", ..., or "none"
is_ai()                   -> bool
detect_all()              -> list[str]        # by priority
get_display_name(tool)    -> str              # "" when unknown
get_notification_email(tool) -> str           # "" when unknown
scan_environment_only()   -> frozenset[str]
scan_process_tree_only()  -> frozenset[str]
detect_report()           -> DetectionReport  # everything above at once
"""

from __future__ import annotations

import logging
import platform
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from amiai.config import AmiConfig
from amiai.context import DetectionContext
from amiai.env import scan_environment
from amiai.log import enable_debug_logging
from amiai.process import ProcessInspector
from amiai.registry import NONE, lookup
from amiai.resolve import order_by_priority, resolve
from amiai.tree import scan_process_tree

logger = logging.getLogger(__name__)


class DetectionReport(BaseModel):
    """Structured result, as printed by ``am-i-ai --json``."""

    primary: str = NONE
    is_ai: bool = False
    matches: list[str] = Field(default_factory=list)
    environment_matches: list[str] = Field(default_factory=list)
    process_matches: list[str] = Field(default_factory=list)
    display_name: str = ""
    notification_email: str = ""
    version: str = ""
    platform: str = Field(default_factory=platform.system)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _build_context(
    env: Mapping[str, str] | None = None,
    pid: int | None = None,
    inspector: ProcessInspector | None = None,
    max_depth: int | None = None,
) -> DetectionContext:
    config = AmiConfig(env, max_depth=max_depth)
    if config.debug:
        enable_debug_logging()
    return DetectionContext(env=env, pid=pid, inspector=inspector, max_depth=config.max_depth)


def _scan_env(context: DetectionContext) -> frozenset[str]:
    return scan_environment(context.env, lambda: context.parent_name)


def _name_or_email(tool: str | None, attr: str, overrides: dict[str, Any]) -> str:
    tool_id = tool or detect(**overrides)
    descriptor = lookup(tool_id)
    if descriptor is None:
        return ""
    return getattr(descriptor, attr)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def detect_report(
    *,
    env: Mapping[str, str] | None = None,
    pid: int | None = None,
    inspector: ProcessInspector | None = None,
    max_depth: int | None = None,
) -> DetectionReport:
    """Run both phases and return every intermediate result."""
    from amiai import __version__

    context = _build_context(env, pid, inspector, max_depth)
    logger.debug("Starting AI detection")
    env_matches = _scan_env(context)
    tree_matches = scan_process_tree(context)
    resolution = resolve(env_matches, tree_matches)

    logger.debug("Environment detected: %s", " ".join(order_by_priority(env_matches)) or "-")
    logger.debug("Process tree detected: %s", " ".join(order_by_priority(tree_matches)) or "-")
    logger.debug("Final result: %s", resolution.primary)

    descriptor = lookup(resolution.primary)
    return DetectionReport(
        primary=resolution.primary,
        is_ai=resolution.is_ai,
        matches=list(resolution.matches),
        environment_matches=list(order_by_priority(env_matches)),
        process_matches=list(order_by_priority(tree_matches)),
        display_name=descriptor.display_name if descriptor else "",
        notification_email=descriptor.notification_email if descriptor else "",
        version=__version__,
    )


def detect(**overrides: Any) -> str:
    """Highest-priority detected tool id, or ``"none"``."""
    return detect_report(**overrides).primary


def is_ai(**overrides: Any) -> bool:
    return detect_report(**overrides).is_ai


def detect_all(**overrides: Any) -> list[str]:
    """Every detected tool id, deduplicated and ordered by priority."""
    return detect_report(**overrides).matches


def get_display_name(tool: str | None = None, **overrides: Any) -> str:
    """Human-readable name for *tool* (default: the detected tool)."""
    return _name_or_email(tool, "display_name", overrides)


def get_notification_email(tool: str | None = None, **overrides: Any) -> str:
    """Commit/notification address for *tool* (default: the detected tool)."""
    return _name_or_email(tool, "notification_email", overrides)


def scan_environment_only(
    *,
    env: Mapping[str, str] | None = None,
    pid: int | None = None,
    inspector: ProcessInspector | None = None,
) -> frozenset[str]:
    """Phase 1 on its own.  Touches the process table only for Zed."""
    return _scan_env(_build_context(env, pid, inspector, max_depth=1))


def scan_process_tree_only(**overrides: Any) -> frozenset[str]:
    """Phase 2 on its own."""
    return scan_process_tree(_build_context(**overrides))


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def format_json(report: DetectionReport) -> str:
    return report.model_dump_json(indent=2)
