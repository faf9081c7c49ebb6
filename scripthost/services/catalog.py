from __future__ import annotations

import logging
import os
from pathlib import Path

from scripthost.core.logging import get_logger, log_event
from scripthost.domain.scripts import SearchLocation

logger = get_logger(__name__)


def is_filesystem_root(path: str) -> bool:
    if not path:
        return False
    candidate = Path(path)
    return bool(candidate.anchor) and candidate == Path(candidate.anchor)


def build_catalog(
    extra_paths: str,
    cwd: Path | str,
    *,
    separator: str = os.pathsep,
) -> tuple[SearchLocation, ...]:
    """Return the ordered search locations: cwd first, then each extra path."""

    locations = [SearchLocation(path=str(cwd), is_cwd=True, allow_recursion=False)]
    for raw in (extra_paths or "").split(separator):
        path = raw.strip()
        if not path:
            continue
        locations.append(
            SearchLocation(path=path, allow_recursion=not is_filesystem_root(path))
        )

    log_event(
        logger,
        "catalog_built",
        level=logging.DEBUG,
        locations=[location.path for location in locations],
    )
    return tuple(locations)
