from __future__ import annotations

import argparse
import json
import sys
import traceback
from pathlib import Path
from typing import Any, Sequence

from scripthost import __version__
from scripthost.core.config import RuntimeConfig, get_runtime_config
from scripthost.core.errors import ScriptHostError, format_error
from scripthost.core.formatting import (
    OUTPUT_FORMATS,
    normalize_output_format,
    render_value,
)
from scripthost.core.logging import configure_logging
from scripthost.core.script_runner import ScriptResult, ScriptRunner, ScriptStatus
from scripthost.core.settings_store import (
    SettingsStore,
    default_settings_path,
    resolve_script_path_spec,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scripthost",
        description="Find and run Python scripts from a search path.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Print version and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Write debug logging to stderr.",
    )
    parser.add_argument(
        "--settings",
        dest="settings_path",
        help="Path to settings.json (default: the user config directory).",
    )

    subparsers = parser.add_subparsers(dest="command")

    script_parser = subparsers.add_parser(
        "script",
        aliases=["scr"],
        help="Run a script by name, or list every available script.",
        description=(
            "Run a script found in the current directory or the extra search "
            "paths. With no name, list all available scripts. Use '-' to read "
            "code from standard input."
        ),
    )
    script_parser.add_argument(
        "--script-path",
        dest="script_path",
        help=(
            "Additional paths to search for scripts, separated by : "
            "(Unix-based systems) or ; (Windows)."
        ),
    )
    _add_format_argument(script_parser)
    script_parser.add_argument(
        "name",
        nargs="?",
        default="",
        help="Script name or path. Omit to list scripts.",
    )
    script_parser.add_argument(
        "extra",
        nargs=argparse.REMAINDER,
        help="Arguments passed through to the script.",
    )
    script_parser.set_defaults(handler=handle_script)

    eval_parser = subparsers.add_parser(
        "eval",
        aliases=["ev"],
        help="Evaluate inline Python code.",
    )
    _add_format_argument(eval_parser)
    eval_parser.add_argument("code", help="Python code to evaluate.")
    eval_parser.set_defaults(handler=handle_eval)

    config_parser = subparsers.add_parser(
        "print-config",
        help="Print resolved runtime config and settings to stdout.",
    )
    config_parser.set_defaults(handler=handle_print_config)

    return parser


def _add_format_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        help="How to print the returned value (default: pretty).",
    )


def _settings_store(args: argparse.Namespace) -> SettingsStore:
    if args.settings_path:
        return SettingsStore(Path(args.settings_path).expanduser())
    return SettingsStore(default_settings_path())


def _print_result(
    result: ScriptResult,
    args: argparse.Namespace,
    settings: dict[str, Any],
) -> None:
    if result.status is ScriptStatus.LISTED:
        if result.listing:
            print(result.render_listing())
        return
    if result.value is None:
        return
    config = get_runtime_config()
    format_name = normalize_output_format(
        args.output_format or settings.get("outputFormat") or config.output_format
    )
    print(render_value(result.value, format_name))


def handle_script(args: argparse.Namespace) -> None:
    config = get_runtime_config()
    settings = _settings_store(args).load()
    script_path = resolve_script_path_spec(
        args.script_path, config.script_path, settings
    )
    argv = [args.name, *args.extra] if args.name else []
    result = ScriptRunner().run(argv, script_path=script_path, command=args.command)
    _print_result(result, args, settings)


def handle_eval(args: argparse.Namespace) -> None:
    settings = _settings_store(args).load()
    result = ScriptRunner().evaluate(args.code)
    _print_result(result, args, settings)


def handle_print_config(args: argparse.Namespace) -> None:
    settings_store = _settings_store(args)
    payload = {
        "runtime": get_runtime_config().model_dump(mode="json"),
        "settings_path": str(settings_store.path),
        "settings": settings_store.load(),
    }
    print(json.dumps(payload, indent=2))


def _configure_logging(config: RuntimeConfig, verbose: bool) -> None:
    if verbose:
        configure_logging(level="debug", format_name="text", stream=sys.stderr)
        return
    configure_logging(
        level=config.log_level,
        format_name=config.log_format,
        log_dir=config.log_dir,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    _configure_logging(get_runtime_config(), args.verbose)

    try:
        args.handler(args)
    except ScriptHostError as exc:
        message, _severity = format_error(exc)
        print(message, file=sys.stderr)
        return 1
    except Exception:
        traceback.print_exc(file=sys.stderr)
        return 3
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
