from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, TextIO

LOG_FILENAME = "scripthost.log"

# Marks handlers installed here so a later call replaces them instead of stacking.
_HANDLER_FLAG = "_scripthost_handler"


def get_logger(name: str = "scripthost") -> logging.Logger:
    return logging.getLogger(name)


def _build_handler(stream: TextIO | None, log_dir: Path | None) -> logging.Handler:
    if stream is not None:
        return logging.StreamHandler(stream)
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_dir / LOG_FILENAME, encoding="utf-8")
    return logging.NullHandler()


def configure_logging(
    *,
    level: str = "info",
    format_name: str = "json",
    stream: TextIO | None = None,
    log_dir: Path | None = None,
) -> logging.Handler:
    """Route scripthost events to ``stream``, a file in ``log_dir``, or nowhere.

    Handlers from an earlier call are closed and replaced; handlers installed by
    anything else are left alone.
    """

    level_value = getattr(logging, level.strip().upper(), logging.INFO)
    if format_name == "json":
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter("%(levelname)s %(name)s %(message)s")

    handler = _build_handler(stream, log_dir)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_FLAG, True)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, _HANDLER_FLAG, False):
            root.removeHandler(existing)
            existing.close()
    root.setLevel(level_value)
    root.addHandler(handler)
    return handler


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event, **fields}
    logger.log(level, json.dumps(payload, sort_keys=True, default=str))
