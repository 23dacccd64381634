"""am-i-ai: detect whether an AI coding agent is driving this process.

Diagnostics go to the ``amiai`` logger.  Detection calls install a stderr
handler themselves when ``AMI_DEBUG`` is true; embedders that want them
otherwise call :func:`configure_logging`.
"""

from __future__ import annotations

import logging

from amiai.detect import (
    DetectionReport,
    detect,
    detect_all,
    detect_report,
    get_display_name,
    get_notification_email,
    is_ai,
    scan_environment_only,
    scan_process_tree_only,
)
from amiai.log import configure_logging
from amiai.registry import NONE, PRIORITY, ToolDescriptor, all_tools, lookup

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.1.0"
__all__ = [
    "DetectionReport",
    "NONE",
    "PRIORITY",
    "ToolDescriptor",
    "all_tools",
    "configure_logging",
    "detect",
    "detect_all",
    "detect_report",
    "get_display_name",
    "get_notification_email",
    "is_ai",
    "lookup",
    "scan_environment_only",
    "scan_process_tree_only",
]
