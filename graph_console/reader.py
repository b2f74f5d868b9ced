"""
    Line readers — where command handlers get their field values from.

    Handlers only see the ``LineReader`` interface, so the console loop
    reads from the terminal while tests feed scripted lines.
"""
from abc import ABC, abstractmethod

from rich.console import Console


class LineReader(ABC):
    """
        Source of input lines.
        Raises ``EOFError`` when input is exhausted.
    """

    @abstractmethod
    def read_line(self, prompt: str = "") -> str:
        """Read one whitespace-trimmed line."""
        ...

    def read_int(self, prompt: str = "") -> int:
        """
        Read one line and parse it as an integer.

        Raises:
            ValueError: If the line is not an integer.
        """
        text = self.read_line(prompt)
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"'{text}' is not an integer")


class ConsoleLineReader(LineReader):
    """Reads from the terminal through ``rich.console.Console.input``."""

    def __init__(self, console: Console):
        self._console = console

    def read_line(self, prompt: str = "") -> str:
        return self._console.input(prompt).strip()
