"""
    CommandProcessor — matches a command token and dispatches it.

    Design Patterns
    ───────────────
    • Chain of Responsibility – handlers are tried in a fixed priority
                                order; the first match executes.
    • Facade                  – single ``dispatch(token, ...)`` entry-point.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..context import GraphContext
from ..reader import LineReader
from .commands import (
    Command,
    CommandResult,
    AddNodeCommand,
    AddEdgeCommand,
    AddWeightCommand,
    InfoCommand,
    PrintCommand,
    ExitCommand,
)

logger = logging.getLogger(__name__)


class UnrecognizedCommandError(Exception):
    """Raised when an input token matches no command."""
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown command: '{token}'")


def default_commands() -> List[Command]:
    """The built-in handlers in priority order."""
    return [
        AddNodeCommand(),
        AddEdgeCommand(),
        AddWeightCommand(),
        InfoCommand(),
        PrintCommand(),
        ExitCommand(),
    ]


class CommandProcessor:
    """
    Holds the ordered handler list and runs the first one that matches.

    Usage:
        processor = CommandProcessor()
        result = processor.dispatch("add_node", context, reader)
    """

    def __init__(self, commands: Optional[Sequence[Command]] = None):
        self._commands: List[Command] = list(commands) if commands is not None else default_commands()

    @property
    def commands(self) -> List[Command]:
        return list(self._commands)

    def find(self, token: str) -> Command:
        """
        Return the first handler matching ``token``.

        Raises:
            UnrecognizedCommandError: If no handler matches.
        """
        for command in self._commands:
            if command.matches(token):
                return command
        raise UnrecognizedCommandError(token)

    def dispatch(self, token: str, context: GraphContext,
                 reader: LineReader) -> CommandResult:
        """
        Execute the command named by ``token``.

        Unknown tokens and invalid field input come back as failed
        results; only ``EOFError`` escapes.
        """
        token = token.strip()
        try:
            command = self.find(token)
        except UnrecognizedCommandError as e:
            logger.warning("%s", e)
            return CommandResult(False, str(e), pause=True)

        logger.debug("Dispatching '%s'", command.keyword)
        return command.execute(context, reader)
