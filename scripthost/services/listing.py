from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Iterator

from scripthost.core.logging import get_logger, log_event
from scripthost.domain.scripts import SCRIPT_SUFFIX, Catalog

logger = get_logger(__name__)

SCRIPT_PATTERN = re.compile(re.escape(SCRIPT_SUFFIX) + r"$")
IGNORED_ENTRIES = frozenset({".", "..", "CVS"})


def _sorted_entries(directory: Path) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as iterator:
            entries = list(iterator)
    except (FileNotFoundError, NotADirectoryError, PermissionError):
        return []
    return sorted(entries, key=lambda entry: entry.name)


def _is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def scan_directory(
    directory: Path,
    pattern: re.Pattern[str] = SCRIPT_PATTERN,
    *,
    recurse: bool = True,
    ignored: frozenset[str] = IGNORED_ENTRIES,
) -> Iterator[Path]:
    """Yield files under ``directory`` whose name matches ``pattern``.

    Entries are visited in name order, depth first. Directories are only
    descended into when ``recurse`` is set; entries named in ``ignored`` are
    skipped at every depth. A missing or unreadable directory yields nothing.
    """

    for entry in _sorted_entries(directory):
        if entry.name in ignored:
            continue
        path = directory / entry.name
        if _is_dir(entry):
            if recurse:
                yield from scan_directory(
                    path, pattern, recurse=recurse, ignored=ignored
                )
            continue
        if pattern.search(entry.name):
            yield path


def list_scripts(catalog: Catalog) -> Iterator[str]:
    """Yield every discoverable script, location by location, without deduplication."""

    for location in catalog:
        count = 0
        for path in scan_directory(
            Path(location.path), recurse=location.allow_recursion
        ):
            count += 1
            yield str(path)
        log_event(
            logger,
            "script_listed",
            level=logging.DEBUG,
            location=location.path,
            recursive=location.allow_recursion,
            count=count,
        )
