from __future__ import annotations

from typing import Sequence


class ScriptArguments:
    """Command arguments as seen by an executed script.

    The launcher records how many leading arguments (its own command name and
    the script path) the next :meth:`shift` must skip, so a script that calls
    ``arguments.shift()`` starts at its first real argument while
    :meth:`arguments` still exposes the complete list.
    """

    def __init__(self, argv: Sequence[str]) -> None:
        self._argv = list(argv)
        self._shift_skip = 0

    @property
    def shift_skip(self) -> int:
        return self._shift_skip

    def set_shift_skip(self, count: int) -> None:
        if count < 0:
            raise ValueError("Shift skip count cannot be negative.")
        self._shift_skip = count

    def reset(self) -> None:
        self._shift_skip = 0

    def arguments(self) -> list[str]:
        return list(self._argv)

    def shift(self) -> str | None:
        if not self._argv:
            return None
        if self._shift_skip:
            del self._argv[: self._shift_skip]
            self._shift_skip = 0
        if not self._argv:
            return None
        return self._argv.pop(0)

    def __repr__(self) -> str:
        return f"ScriptArguments({self._argv!r}, shift_skip={self._shift_skip})"
