"""Runtime configuration for the unnest CLI and library entry points."""

from __future__ import annotations

from dataclasses import dataclass

from unnest.selectors.algebra import NESTING_TOKEN, check_nesting_token


@dataclass(frozen=True)
class UnnestConfig:
    indent: int = 2
    nesting_token: str = NESTING_TOKEN
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")
        check_nesting_token(self.nesting_token)
