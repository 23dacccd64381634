"""Host-vs-agent classification for tools that mark every terminal they spawn.

Zed exports ``ZED_ENVIRONMENT`` into git-panel hooks, into terminals a human
types in, and into the shells its own agent drives.  Observed patterns:

    1. Human via git panel:   no terminal vars, ``SHLVL=1``.
    2. Human in the terminal: terminal vars set, parent is an interactive shell.
    3. Zed's native agent:    terminal vars set, ``SHLVL>1``, parent is not a shell.

ACP integrations running inside Zed carry their own markers and are picked up
by their own registry entries.  Anything inconclusive is classified human:
reporting a person as an AI is worse than missing Zed's agent.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

HOST_TERM_PROGRAM = "zed"
HOST_TERM_MARKER = "ZED_TERM"

INTERACTIVE_SHELLS: frozenset[str] = frozenset(
    {"bash", "elvish", "zsh", "fish", "ksh", "tcsh", "dash"}
)


def session_depth(env: Mapping[str, str]) -> int:
    """Shell nesting level from ``SHLVL``; missing or garbage counts as 1."""
    try:
        return int(env.get("SHLVL", "1").strip() or "1")
    except ValueError:
        return 1


def has_terminal_marker(env: Mapping[str, str]) -> bool:
    term_program = env.get("TERM_PROGRAM", "").lower()
    return term_program == HOST_TERM_PROGRAM or bool(env.get(HOST_TERM_MARKER))


def is_interactive_shell(name: str | None) -> bool:
    """True for ``bash``, ``zsh`` etc., including login forms like ``-zsh``."""
    if not name:
        return False
    name = name.strip().lower()
    return name.removeprefix("-") in INTERACTIVE_SHELLS


def classify_host_session(env: Mapping[str, str], parent_name: str | None) -> bool:
    """Decide whether a host signal belongs to the host's autonomous agent.

    Called with the immediate parent's short command name.  Returns True to
    accept the match, False to classify the session as human.
    """
    depth = session_depth(env)
    if not has_terminal_marker(env) or depth <= 1:
        logger.debug("Host signal without nested terminal (SHLVL=%d) - human", depth)
        return False

    if is_interactive_shell(parent_name):
        logger.debug("Host terminal but parent is interactive shell (%s) - human typing", parent_name)
        return False

    logger.debug("Host agent session (parent: %s)", parent_name or "unknown")
    return True
