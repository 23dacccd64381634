"""Central exit-code taxonomy for the am-i-ai command."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes returned by ``am-i-ai``.

    ``--check`` follows shell truthiness, so "no AI" and usage errors share 1.
    """

    SUCCESS = 0
    NOT_DETECTED = 1
    # Same value, so IntEnum makes this an alias: its .name is "NOT_DETECTED".
    USAGE_ERROR = 1
