"""
Graph Console — interactive editor for a directed, weighted graph.

Public API:
    GraphConsole     – the REPL loop
    GraphContext     – graph + locks + console + observer executor
    GraphObserver    – asynchronous node / edge summary
    ConsoleConfig    – top-level configuration
    CommandProcessor – command dispatcher
"""
from .config import ConsoleConfig
from .context import GraphContext, create_console
from .observer import GraphObserver
from .reader import LineReader, ConsoleLineReader
from .cli.command_processor import CommandProcessor
from .console import GraphConsole

__all__ = [
    'ConsoleConfig',
    'GraphContext',
    'create_console',
    'GraphObserver',
    'LineReader',
    'ConsoleLineReader',
    'CommandProcessor',
    'GraphConsole',
]
