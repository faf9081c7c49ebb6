from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from scripthost.core.arguments import ScriptArguments
from scripthost.core.evaluator import Evaluator, evaluate_source
from scripthost.core.logging import get_logger, log_event
from scripthost.domain.scripts import ShebangHeader

logger = get_logger(__name__)

# An include that just "succeeded" reports 1; there is nothing to show for it.
SUCCESS_SENTINEL = 1


def suppress_success_sentinel(value: Any) -> Any | None:
    if type(value) is int and value == SUCCESS_SENTINEL:
        return None
    return value


def build_namespace(
    filename: str,
    arguments: ScriptArguments | None = None,
    extra: list[str] | None = None,
) -> dict[str, Any]:
    return {
        "__name__": "__main__",
        "__file__": filename,
        "arguments": arguments,
        "extra": list(extra or []),
    }


class ScriptExecutor:
    """Evaluate assembled source text through an injectable evaluator."""

    def __init__(self, evaluate: Evaluator = evaluate_source) -> None:
        self._evaluate = evaluate

    def run(
        self,
        source: str | bytes,
        *,
        filename: str = "<string>",
        namespace: Mapping[str, Any] | None = None,
        line_offset: int = 0,
    ) -> Any | None:
        scope = dict(namespace) if namespace is not None else build_namespace(filename)
        value = self._evaluate(
            source,
            scope,
            filename=filename,
            line_offset=line_offset,
        )
        return suppress_success_sentinel(value)

    def run_file(
        self,
        path: Path,
        header: ShebangHeader | None,
        *,
        namespace: Mapping[str, Any] | None = None,
    ) -> Any | None:
        """Execute a resolved script, either its sniffed body or the whole file."""
        if header is None:
            source = path.read_bytes()
            line_offset = 0
        else:
            source = header.source
            line_offset = header.body_line_offset

        value = self.run(
            source,
            filename=str(path),
            namespace=namespace,
            line_offset=line_offset,
        )
        log_event(
            logger,
            "script_executed",
            level=logging.DEBUG,
            path=str(path),
            shebang=header is not None,
            has_result=value is not None,
        )
        return value
