"""Interactive yes/no confirmation."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

__all__ = ["Confirmer", "ConsoleConfirmer", "assume_no", "assume_yes"]


Confirmer = Callable[[str], bool]

_YES = {"y", "yes"}
_NO = {"n", "no"}


def assume_yes(message: str) -> bool:
    return True


def assume_no(message: str) -> bool:
    return False


class ConsoleConfirmer:
    """Ask a yes/no question on a text stream.

    An empty answer selects ``default``. Typing ``?`` shows ``help_text``.
    Reaching end of input is treated as a "no".
    """

    def __init__(
        self,
        *,
        default: bool = False,
        help_text: str = "",
        input_func: Callable[[], str] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.default = default
        self.help_text = help_text
        self._input = input_func
        self._stream = stream

    def _readline(self) -> str:
        if self._input is not None:
            return self._input()
        return input()

    def __call__(self, message: str) -> bool:
        stream = self._stream or sys.stdout
        hint = "Y/n" if self.default else "y/N"
        suffix = ", ? for help" if self.help_text else ""
        while True:
            stream.write(f"? {message} ({hint}{suffix}) ")
            stream.flush()
            try:
                answer = self._readline().strip().lower()
            except EOFError:
                stream.write("\n")
                return False

            if not answer:
                return self.default
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            if answer == "?" and self.help_text:
                stream.write(f"{self.help_text}\n")
                continue
            stream.write("Please answer yes or no.\n")
