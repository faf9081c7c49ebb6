from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from scripthost.core.errors import ScriptNotFoundError
from scripthost.core.logging import get_logger, log_event
from scripthost.domain.scripts import (
    SCRIPT_SUFFIX,
    STDIN_SENTINEL,
    Catalog,
    InlineSource,
    ScriptCandidate,
    ScriptListing,
)
from scripthost.services.listing import list_scripts

logger = get_logger(__name__)

Resolution = ScriptListing | InlineSource | ScriptCandidate


@dataclass(frozen=True)
class Probe:
    """One way of turning a location-relative base path into a candidate file."""

    name: str
    transform: Callable[[Path], Path]
    accepts: Callable[[Path], bool] = Path.exists

    def candidate(self, base: Path) -> Path:
        return self.transform(base)


def _with_script_suffix(base: Path) -> Path:
    return Path(f"{base}{SCRIPT_SUFFIX}")


DEFAULT_PROBES: tuple[Probe, ...] = (
    Probe("suffixed", _with_script_suffix),
    Probe("bare", lambda base: base),
)


def probe_location(
    location_path: str,
    name: str,
    candidate: ScriptCandidate,
    probes: Sequence[Probe] = DEFAULT_PROBES,
) -> Path | None:
    """Try each probe inside one location, recording every miss on ``candidate``."""
    base = Path(location_path) / name
    for probe in probes:
        path = probe.candidate(base)
        if probe.accepts(path):
            return path
        candidate.attempted.append(str(path))
    return None


def resolve_script(
    name: str,
    catalog: Catalog,
    read_stdin: Callable[[], bytes],
    *,
    probes: Sequence[Probe] = DEFAULT_PROBES,
) -> Resolution:
    """Resolve ``name`` to a listing, inline stdin code, or a found script file.

    Raises :class:`ScriptNotFoundError` carrying every attempted path when no
    location holds the script.
    """

    if not name:
        return ScriptListing(catalog=tuple(catalog), lister=list_scripts)

    if name == STDIN_SENTINEL:
        return InlineSource(source=read_stdin())

    candidate = ScriptCandidate(requested_name=name)

    direct = Path(name)
    if direct.exists():
        candidate.resolved_path = direct
        log_event(logger, "script_resolved", level=logging.DEBUG, name=name, path=str(direct))
        return candidate

    for location in catalog:
        found = probe_location(location.path, name, candidate, probes)
        if found is not None:
            candidate.resolved_path = found
            log_event(
                logger,
                "script_resolved",
                level=logging.DEBUG,
                name=name,
                path=str(found),
                location=location.path,
            )
            return candidate

    log_event(logger, "script_not_found", name=name, attempted=candidate.attempted)
    raise ScriptNotFoundError.from_attempts(name, candidate.attempted)
