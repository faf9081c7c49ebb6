from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, BinaryIO, Sequence

from scripthost.core.arguments import ScriptArguments
from scripthost.core.executor import ScriptExecutor, build_namespace
from scripthost.core.logging import get_logger, log_event
from scripthost.domain.scripts import InlineSource, ScriptCandidate, ScriptListing
from scripthost.services.catalog import build_catalog
from scripthost.services.resolver import resolve_script
from scripthost.services.shebang import sniff_shebang

logger = get_logger(__name__)

# The launcher's command name and the script path precede the script's own arguments.
LAUNCHER_ARGUMENT_COUNT = 2


class ScriptStatus(Enum):
    LISTED = "listed"
    EVALUATED = "evaluated"
    EXECUTED = "executed"


@dataclass(frozen=True)
class ScriptResult:
    status: ScriptStatus
    value: Any | None = None
    listing: tuple[str, ...] = field(default_factory=tuple)
    script_path: Path | None = None
    arguments: ScriptArguments | None = None

    def render_listing(self) -> str:
        return "\n".join(self.listing)


class ScriptRunner:
    """Find a script by name across the search path and execute it."""

    def __init__(
        self,
        executor: ScriptExecutor | None = None,
        *,
        cwd: Path | None = None,
        stdin: BinaryIO | None = None,
    ) -> None:
        self._executor = executor or ScriptExecutor()
        self._cwd = cwd
        self._stdin = stdin

    @property
    def cwd(self) -> Path:
        return self._cwd if self._cwd is not None else Path.cwd()

    def evaluate(self, code: str) -> ScriptResult:
        """Evaluate inline code without consulting the search path."""
        value = self._executor.run(code, filename="<eval>")
        return ScriptResult(status=ScriptStatus.EVALUATED, value=value)

    def run(
        self,
        argv: Sequence[str],
        *,
        script_path: str = "",
        command: str = "script",
    ) -> ScriptResult:
        extra = list(argv)
        name = extra.pop(0) if extra else ""

        catalog = build_catalog(script_path, self.cwd)
        resolution = resolve_script(name, catalog, self._read_stdin)

        if isinstance(resolution, ScriptListing):
            return ScriptResult(status=ScriptStatus.LISTED, listing=tuple(resolution))

        arguments = ScriptArguments([command, name, *extra])

        if isinstance(resolution, InlineSource):
            namespace = build_namespace(resolution.filename, arguments, extra)
            value = self._executor.run(
                resolution.source,
                filename=resolution.filename,
                namespace=namespace,
            )
            log_event(logger, "stdin_evaluated", bytes=len(resolution.source))
            return ScriptResult(
                status=ScriptStatus.EVALUATED,
                value=value,
                arguments=arguments,
            )

        return self._execute(resolution, arguments, extra)

    def _execute(
        self,
        candidate: ScriptCandidate,
        arguments: ScriptArguments,
        extra: list[str],
    ) -> ScriptResult:
        path = candidate.resolved_path
        if path is None:
            raise RuntimeError(f"Script {candidate.requested_name!r} was not resolved.")

        arguments.set_shift_skip(LAUNCHER_ARGUMENT_COUNT)
        header = sniff_shebang(path)
        namespace = build_namespace(str(path), arguments, extra)
        value = self._executor.run_file(path, header, namespace=namespace)
        return ScriptResult(
            status=ScriptStatus.EXECUTED,
            value=value,
            script_path=path,
            arguments=arguments,
        )

    def _read_stdin(self) -> bytes:
        stream = self._stdin if self._stdin is not None else sys.stdin.buffer
        return stream.read()
