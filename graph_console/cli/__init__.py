"""
CLI package — command handlers and the dispatcher.

Design Patterns
───────────────
• Command                 – each operation is a ``Command`` object with
                            ``collect()`` and ``apply()`` phases.
• Chain of Responsibility – ``CommandProcessor`` tries handlers in order.
"""
from .command_processor import CommandProcessor, UnrecognizedCommandError, default_commands
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

__all__ = [
    'CommandProcessor',
    'UnrecognizedCommandError',
    'default_commands',
    'Command',
    'CommandResult',
    'AddNodeCommand',
    'AddEdgeCommand',
    'AddWeightCommand',
    'InfoCommand',
    'PrintCommand',
    'ExitCommand',
]
