from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import pytest

from scripthost.core.config import get_runtime_config


@dataclass
class EvaluatorCall:
    source: str | bytes
    namespace: dict[str, Any]
    filename: str
    line_offset: int


@dataclass
class RecordingEvaluator:
    """Stands in for the host evaluator; returns scripted results in order."""

    results: list[Any] = field(default_factory=list)
    calls: list[EvaluatorCall] = field(default_factory=list)

    def __call__(
        self,
        source: str | bytes,
        namespace: dict[str, Any],
        *,
        filename: str = "<string>",
        line_offset: int = 0,
    ) -> Any:
        self.calls.append(EvaluatorCall(source, namespace, filename, line_offset))
        if self.results:
            return self.results.pop(0)
        return None


@pytest.fixture
def evaluator() -> RecordingEvaluator:
    return RecordingEvaluator()


@pytest.fixture(autouse=True)
def _isolated_runtime_config(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "SCRIPTHOST_SCRIPT_PATH",
        "SCRIPTHOST_LOG_LEVEL",
        "SCRIPTHOST_LOG_FORMAT",
        "SCRIPTHOST_LOG_DIR",
        "SCRIPTHOST_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_runtime_config.cache_clear()
    yield
    get_runtime_config.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
