from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, Sequence

SCRIPT_SUFFIX = ".py"
STDIN_SENTINEL = "-"


@dataclass(frozen=True)
class SearchLocation:
    path: str
    is_cwd: bool = False
    allow_recursion: bool = True


Catalog = Sequence[SearchLocation]


@dataclass
class ScriptCandidate:
    requested_name: str
    attempted: list[str] = field(default_factory=list)
    resolved_path: Path | None = None


@dataclass(frozen=True)
class InlineSource:
    """Code read from standard input, evaluated without a catalog lookup."""

    source: bytes
    filename: str = "<stdin>"


@dataclass(frozen=True)
class ScriptListing:
    """Restartable view over every discoverable script in a catalog."""

    catalog: tuple[SearchLocation, ...]
    lister: Callable[[Catalog], Iterator[str]]

    def __iter__(self) -> Iterator[str]:
        return self.lister(self.catalog)


@dataclass(frozen=True)
class ShebangHeader:
    marker: str
    first_body_line: bytes | None
    body: bytes
    body_line_offset: int = 0

    @property
    def source(self) -> bytes:
        if self.first_body_line is None:
            return self.body
        return self.first_body_line + self.body
