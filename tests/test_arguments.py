from __future__ import annotations

import pytest

from scripthost.core.arguments import ScriptArguments


def test_shift_skips_launcher_arguments_once() -> None:
    arguments = ScriptArguments(["script", "job", "--apple", "cider"])
    arguments.set_shift_skip(2)

    assert arguments.arguments() == ["script", "job", "--apple", "cider"]
    assert arguments.shift() == "--apple"
    assert arguments.shift_skip == 0
    assert arguments.shift() == "cider"
    assert arguments.shift() is None


def test_shift_without_skip_starts_at_first_argument() -> None:
    arguments = ScriptArguments(["script", "job"])

    assert arguments.shift() == "script"


def test_reset_clears_skip() -> None:
    arguments = ScriptArguments(["script", "job", "a"])
    arguments.set_shift_skip(2)
    arguments.reset()

    assert arguments.shift() == "script"


def test_skip_beyond_available_arguments() -> None:
    arguments = ScriptArguments(["script"])
    arguments.set_shift_skip(2)

    assert arguments.shift() is None


def test_negative_skip_rejected() -> None:
    with pytest.raises(ValueError):
        ScriptArguments([]).set_shift_skip(-1)


def test_instances_do_not_share_state() -> None:
    first = ScriptArguments(["script", "a", "x"])
    first.set_shift_skip(2)
    second = ScriptArguments(["script", "b", "y"])

    assert second.shift_skip == 0
    assert first.shift() == "x"
    assert second.shift() == "script"
