"""User-configurable settings for the advisory oracle."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_ENV_DEPTH = "CHESSRULES_ORACLE_DEPTH"
_ENV_ENABLED = "CHESSRULES_ORACLE_ENABLED"
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass
class AdvisorySettings:
    """How (and whether) the analysis oracle is consulted."""

    depth: int = 15
    enabled: bool = True

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError(f"Oracle depth must be at least 1, got {self.depth}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AdvisorySettings:
        """Defaults overridden by ``CHESSRULES_ORACLE_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()

        raw_depth = env.get(_ENV_DEPTH)
        if raw_depth is not None:
            try:
                depth = int(raw_depth)
            except ValueError:
                raise ValueError(f"{_ENV_DEPTH} must be an integer: {raw_depth!r}") from None
            settings = cls(depth=depth, enabled=settings.enabled)

        raw_enabled = env.get(_ENV_ENABLED)
        if raw_enabled is not None:
            settings.enabled = raw_enabled.strip().lower() not in _FALSE_VALUES
        return settings
