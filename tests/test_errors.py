from __future__ import annotations

from scripthost.core.errors import (
    ScriptHostError,
    ScriptNotFoundError,
    format_error,
)


def test_not_found_message_names_every_path() -> None:
    error = ScriptNotFoundError.from_attempts("job", ["/a/job.py", "/a/job"])

    message, severity = format_error(error)

    assert message.startswith("[script_not_found] Unable to find any of the following: ")
    assert "/a/job.py, /a/job" in message
    assert severity == "error"


def test_format_error_uses_error_severity() -> None:
    error = ScriptHostError(code="note", message="heads up", severity="warning")

    assert format_error(error) == ("[note] heads up", "warning")
    assert format_error(ValueError("plain")) == ("plain", "error")
