"""Interactive terminal prompts."""

from __future__ import annotations

import getpass
from collections.abc import Callable, Sequence

Validator = Callable[[str], str | None]

_YES = {"y", "yes"}
_NO = {"n", "no"}


def not_blank(message: str) -> Validator:
    """Build a validator that rejects blank answers with the given message."""

    def _check(answer: str) -> str | None:
        return None if answer.strip() else message

    return _check


class Prompter:
    """Ask questions on the terminal; readers are injectable for tests."""

    def __init__(
        self,
        reader: Callable[[str], str] = input,
        secret_reader: Callable[[str], str] = getpass.getpass,
        writer: Callable[[str], None] = print,
    ) -> None:
        self._read = reader
        self._read_secret = secret_reader
        self._write = writer

    def _ask(
        self,
        read: Callable[[str], str],
        message: str,
        default: str | None,
        validate: Validator | None,
    ) -> str:
        suffix = f" ({default})" if default else ""
        while True:
            answer = read(f"? {message}{suffix} ")
            if not answer and default is not None:
                answer = default
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self._write(f">> {error}")

    def ask_text(
        self,
        message: str,
        default: str | None = None,
        validate: Validator | None = None,
    ) -> str:
        return self._ask(self._read, message, default, validate)

    def ask_secret(self, message: str, validate: Validator | None = None) -> str:
        return self._ask(self._read_secret, message, None, validate)

    def ask_confirm(self, message: str, default: bool = False) -> bool:
        hint = "Y/n" if default else "y/N"
        while True:
            answer = self._read(f"? {message} ({hint}) ").strip().lower()
            if not answer:
                return default
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            self._write(">> Please answer y or n")

    def ask_choice(self, message: str, choices: Sequence[str], default: int = 0) -> str:
        """Show a numbered menu and return the selected entry."""
        if not choices:
            raise ValueError("No choices provided")
        self._write(f"? {message}")
        for number, choice in enumerate(choices, start=1):
            marker = ">" if number - 1 == default else " "
            self._write(f" {marker} {number}) {choice}")
        while True:
            answer = self._read(f"  Answer (1-{len(choices)}) [{default + 1}]: ").strip()
            if not answer:
                return choices[default]
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1]
            self._write(f">> Enter a number between 1 and {len(choices)}")
