from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence

Severity = Literal["error", "warning", "information"]


@dataclass
class ScriptHostError(Exception):
    code: str
    message: str
    detail: str | None = None
    severity: Severity = "error"

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


@dataclass
class ScriptNotFoundError(ScriptHostError):
    """No catalog location held the requested script."""

    attempted: tuple[str, ...] = ()

    @classmethod
    def from_attempts(cls, name: str, attempted: Sequence[str]) -> ScriptNotFoundError:
        paths = tuple(attempted)
        return cls(
            code="script_not_found",
            message=f"Unable to find any of the following: {', '.join(paths)}",
            detail=f"script {name!r}" if name else None,
            attempted=paths,
        )


def format_error(error: BaseException) -> tuple[str, Severity]:
    if isinstance(error, ScriptHostError):
        prefix = f"[{error.code}] " if error.code else ""
        return f"{prefix}{error}", error.severity
    return f"{error}", "error"
