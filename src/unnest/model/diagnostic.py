"""Diagnostic model: structured findings about a flattened style sheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about the shape of a node forest.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        selector: Selector text of the offending rule, if applicable.
        at_rules: Enclosing at-rule preludes, outermost first.
    """

    rule: str
    severity: Severity
    message: str
    selector: str | None = None
    at_rules: tuple[str, ...] = ()

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.selector:
            location = f" [rule={self.selector}]"
        if self.at_rules:
            location += f" [in {' > '.join(self.at_rules)}]"
        return f"{self.severity.value}{location}: {self.message}"
