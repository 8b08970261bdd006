"""
Input/Output Gateway

Everything the session shows or asks goes through a Gateway. The console
implementation uses print() and input(); tests substitute a scripted one.
"""

from abc import ABC, abstractmethod

from .data import messages


def parse_number(text: str) -> float | None:
    """
    Parse a line of user input as a decimal number.

    Surrounding whitespace is ignored. Returns None when the text is not a
    number. Python's digit-grouping underscores ("1_000") are refused.
    """
    text = text.strip()
    if not text or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


class Gateway(ABC):
    """Base class for user interaction: show a line, read a line."""

    @abstractmethod
    def display(self, message: str) -> None:
        """Write one line of text to the user."""

    @abstractmethod
    def read_line(self) -> str:
        """Read one line of user input (EOFError when input is closed)."""

    def get_numeric_input(self, prompt: str) -> float:
        """Show prompt and read until the user enters a number."""
        while True:
            self.display(prompt)
            value = parse_number(self.read_line())
            if value is not None:
                return value
            self.display(messages.INVALID_NUMBER)


class ConsoleGateway(Gateway):
    """Gateway on stdin/stdout."""

    def display(self, message: str) -> None:
        print(message)

    def read_line(self) -> str:
        return input()
