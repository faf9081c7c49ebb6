from __future__ import annotations

import logging
from pathlib import Path

from scripthost.core.logging import get_logger, log_event
from scripthost.domain.scripts import ShebangHeader

logger = get_logger(__name__)

MARKER_PREFIX = "#!"
MARKER_WORD = "scripthost"
CODE_START_TOKEN = b"# %%"


def is_marker_line(line: str) -> bool:
    return line.startswith(MARKER_PREFIX) and MARKER_WORD in line


def sniff_shebang(path: Path) -> ShebangHeader | None:
    """Split a self-aware script into its header and executable body.

    Returns ``None`` when the first line is not a scripthost marker. Otherwise
    blank lines after the marker are skipped; a ``# %%`` line ends the header
    and is dropped, while any other line is kept byte for byte as the first
    body line.
    """

    with open(path, "rb") as handle:
        first = handle.readline().decode("utf-8", errors="replace")
        if not is_marker_line(first):
            return None

        consumed = 1
        first_body_line: bytes | None = None
        for raw in iter(handle.readline, b""):
            consumed += 1
            stripped = raw.strip()
            if stripped == CODE_START_TOKEN:
                break
            if stripped:
                first_body_line = raw
                consumed -= 1
                break
        body = handle.read()

    log_event(
        logger,
        "shebang_detected",
        level=logging.DEBUG,
        path=str(path),
        marker=first.rstrip("\r\n"),
    )
    return ShebangHeader(
        marker=first.rstrip("\r\n"),
        first_body_line=first_body_line,
        body=body,
        body_line_offset=consumed,
    )
