"""Settings precedence for am-i-ai: defaults, then ``AMI_*`` env vars, then overrides."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from amiai.process import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

ENV_PREFIX = "AMI_"


def _parse_bool_env(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_depth(value: str) -> int | None:
    try:
        depth = int(value.strip())
    except ValueError:
        return None
    return depth if depth > 0 else None


class AmiConfig:
    """Resolves configuration through the precedence chain.

    There is no config file; the environment is the only persistent source.
    Invalid values are logged and ignored.
    """

    def __init__(self, env: Mapping[str, str] | None = None, **overrides: Any) -> None:
        self._env = os.environ if env is None else env
        self._overrides = {k: v for k, v in overrides.items() if v is not None}
        self._config: dict[str, Any] = {}
        self._load_defaults()
        self._load_env_vars()
        self._config.update(self._overrides)

    def _load_defaults(self) -> None:
        self._config = {
            "debug": False,
            "max_depth": DEFAULT_MAX_DEPTH,
        }

    def _load_env_vars(self) -> None:
        """Load from AMI_DEBUG / AMI_MAX_DEPTH, skipping keys given as overrides."""
        if f"{ENV_PREFIX}DEBUG" in self._env:
            self._config["debug"] = _parse_bool_env(self._env[f"{ENV_PREFIX}DEBUG"])

        raw_depth = self._env.get(f"{ENV_PREFIX}MAX_DEPTH")
        if raw_depth and "max_depth" not in self._overrides:
            depth = _parse_depth(raw_depth)
            if depth is None:
                logger.warning(
                    "Ignoring %sMAX_DEPTH=%r (expected a positive integer)", ENV_PREFIX, raw_depth
                )
            else:
                self._config["max_depth"] = depth

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    @property
    def debug(self) -> bool:
        return bool(self._config["debug"])

    @property
    def max_depth(self) -> int:
        return int(self._config["max_depth"])
