from __future__ import annotations

import json
from typing import Any, Literal

from rich.pretty import pretty_repr

OutputFormat = Literal["pretty", "json", "string"]

OUTPUT_FORMATS: tuple[OutputFormat, ...] = ("pretty", "json", "string")


def normalize_output_format(value: object) -> OutputFormat:
    text = str(value or "").strip().lower()
    if text in OUTPUT_FORMATS:
        return text  # type: ignore[return-value]
    return "pretty"


def render_value(value: Any, format_name: OutputFormat = "pretty") -> str:
    if format_name == "json":
        return json.dumps(value, indent=2, ensure_ascii=False, default=str)
    if format_name == "string":
        return str(value)
    return pretty_repr(value)
