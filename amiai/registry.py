"""Static registry of known AI coding agents.

Each :class:`ToolDescriptor` bundles everything the detectors need to know
about one tool: how it marks the environment, what its processes look like,
and the presentation metadata used by commit hooks and banners.

Adding a tool is a data change here (plus a slot in :data:`PRIORITY`); no
other module branches on tool ids except the host disambiguation rule.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass

EnvPredicate = Callable[[Mapping[str, str]], bool]

NONE: str = "none"
"""Sentinel returned when no tool is detected."""


@dataclass(frozen=True)
class ToolDescriptor:
    """Detection signals and metadata for a single tool."""

    id: str
    display_name: str
    notification_email: str
    env_predicate: EnvPredicate | None = None
    process_pattern: re.Pattern[str] | None = None
    requires_disambiguation: bool = False

    def matches_env(self, env: Mapping[str, str]) -> bool:
        if self.env_predicate is None:
            return False
        return self.env_predicate(env)

    def matches_process(self, *texts: str) -> bool:
        """True when any of *texts* (short name, command line) hits the pattern."""
        if self.process_pattern is None:
            return False
        return any(text and self.process_pattern.search(text) for text in texts)


# ---------------------------------------------------------------------------
# Predicate and pattern builders
# ---------------------------------------------------------------------------

def _is_set(*keys: str) -> EnvPredicate:
    """Any of *keys* present with a non-empty value."""
    return lambda env: any(env.get(k) for k in keys)


def _equals(key: str, *values: str) -> EnvPredicate:
    return lambda env: env.get(key, "") in values


def _any_of(*predicates: EnvPredicate) -> EnvPredicate:
    return lambda env: any(p(env) for p in predicates)


def _substring(text: str) -> re.Pattern[str]:
    return re.compile(re.escape(text), re.IGNORECASE)


def _word(text: str) -> re.Pattern[str]:
    # Same notion of "word" as grep -w: letters, digits and underscore.
    return re.compile(rf"(?<!\w){re.escape(text)}(?!\w)", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        id="claude",
        display_name="Claude Code",
        notification_email="noreply@anthropic.com",
        # ACP mode sets only CLAUDECODE; CLI/SDK mode sets both.
        env_predicate=_any_of(
            _is_set("CLAUDECODE"),
            _equals("CLAUDE_CODE_ENTRYPOINT", "cli", "sdk-ts"),
        ),
        process_pattern=_substring("claude"),
    ),
    ToolDescriptor(
        id="gemini",
        display_name="Gemini",
        notification_email="noreply@google.com",
        env_predicate=_is_set("GEMINI_CLI"),
        process_pattern=_substring("gemini"),
    ),
    ToolDescriptor(
        id="qwen",
        display_name="Qwen Code",
        notification_email="noreply@alibaba.com",
        env_predicate=_is_set("QWEN_CODE"),
        process_pattern=_substring("qwen"),
    ),
    ToolDescriptor(
        id="cursor",
        display_name="Cursor AI",
        notification_email="cursoragent@cursor.com",
        # CURSOR_AGENT / cursor-agent, never the IDE's own terminal markers.
        env_predicate=_is_set("CURSOR_AGENT"),
        process_pattern=_substring("cursor-agent"),
    ),
    ToolDescriptor(
        id="opencode",
        display_name="opencode AI",
        notification_email="noreply@opencode.ai",
        env_predicate=_is_set("OPENCODE_AI"),
        process_pattern=_substring("opencode"),
    ),
    ToolDescriptor(
        id="codex",
        display_name="Codex CLI",
        notification_email="noreply@openai.com",
        env_predicate=_is_set("CODEX_CLI", "CODEX_SANDBOX"),
        process_pattern=_substring("codex"),
    ),
    ToolDescriptor(
        id="aider",
        display_name="Aider",
        notification_email="aider@aider.chat",
        env_predicate=_equals("OR_APP_NAME", "Aider"),
        process_pattern=_substring("aider"),
    ),
    ToolDescriptor(
        id="zed",
        display_name="Zed AI",
        notification_email="noreply@zed.dev",
        env_predicate=_is_set("ZED_ENVIRONMENT"),
        process_pattern=_substring("zed"),
        requires_disambiguation=True,
    ),
    ToolDescriptor(
        id="copilot",
        display_name="GitHub Copilot",
        notification_email="copilot@github.com",
        env_predicate=_equals("GITHUB_COPILOT_CLI_MODE", "true"),
    ),
    ToolDescriptor(
        id="droid",
        display_name="Droid",
        notification_email="droid@factory.ai",
        env_predicate=_is_set("DROID_CLI"),
        process_pattern=_word("droid"),
    ),
    ToolDescriptor(
        id="amp",
        display_name="Amp",
        notification_email="noreply@sourcegraph.com",
        env_predicate=_any_of(_equals("AGENT", "amp"), _is_set("AMP_HOME")),
    ),
    ToolDescriptor(
        id="kimi",
        display_name="Kimi CLI",
        notification_email="noreply@kimi.com",
        env_predicate=_is_set("KIMI_CLI"),
        process_pattern=_substring("kimi"),
    ),
    ToolDescriptor(
        id="openhands",
        display_name="OpenHands",
        notification_email="openhands@all-hands.dev",
        env_predicate=_any_of(_equals("OR_APP_NAME", "OpenHands"), _is_set("OR_SITE_URL")),
    ),
    ToolDescriptor(
        id="crush",
        display_name="Crush",
        notification_email="crush@charm.land",
        process_pattern=_substring("crush"),
    ),
    ToolDescriptor(
        id="goose",
        display_name="Goose User",
        notification_email="goose@opensource.block.xyz",
        env_predicate=_is_set("GOOSE_TERMINAL"),
        process_pattern=_substring("goose"),
    ),
    ToolDescriptor(
        id="auggie",
        display_name="Augment Code",
        notification_email="noreply@augmentcode.com",
        env_predicate=_is_set("AUGMENT_API_TOKEN"),
        process_pattern=_substring("auggie"),
    ),
    ToolDescriptor(
        id="cline",
        display_name="Cline",
        notification_email="cline@cline.bot",
        env_predicate=_is_set("CLINE_TASK_ID"),
        process_pattern=_substring("cline"),
    ),
    ToolDescriptor(
        id="roo",
        display_name="Roo Code",
        notification_email="roo@roocode.dev",
        env_predicate=_is_set("ROO_CODE_TASK_ID"),
        # Whole word only: "kangaroo" must not match.
        process_pattern=_word("roo"),
    ),
    ToolDescriptor(
        id="windsurf",
        display_name="Windsurf Cascade",
        notification_email="cascade@codeium.com",
        env_predicate=_any_of(_is_set("WINDSURF_SESSION"), _equals("TERM_PROGRAM", "windsurf")),
        process_pattern=_substring("windsurf"),
    ),
)

_BY_ID: dict[str, ToolDescriptor] = {tool.id: tool for tool in _TOOLS}

PRIORITY: tuple[str, ...] = (
    "amp",
    "codex",
    "aider",
    "claude",
    "gemini",
    "qwen",
    "droid",
    "opencode",
    "cursor",
    "copilot",
    "kimi",
    "openhands",
    "cline",
    "roo",
    "windsurf",
    "crush",
    "goose",
    "auggie",
    # Zed often hosts the other agents, so anything running inside it wins.
    "zed",
)
"""Resolution order, highest first.  Narrow agents outrank IDE-level hosts."""

_RANK: dict[str, int] = {tool_id: index for index, tool_id in enumerate(PRIORITY)}


def all_tools() -> tuple[ToolDescriptor, ...]:
    """Every registered tool, in registration order."""
    return _TOOLS


def lookup(tool_id: str | None) -> ToolDescriptor | None:
    if not tool_id:
        return None
    return _BY_ID.get(tool_id)


def rank(tool_id: str) -> int | None:
    """Position of *tool_id* in :data:`PRIORITY` (0 is highest), or None."""
    return _RANK.get(tool_id)
