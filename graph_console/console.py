"""
    GraphConsole — the interactive read-dispatch loop.

    Every iteration prints the command banner and notifies the graph's
    observers (both under the output lock), reads a command token,
    dispatches it and prints the result.  The loop ends on ``exit`` or
    at end of input.
"""
import logging
import time
from typing import Callable, Optional

from .cli.command_processor import CommandProcessor
from .cli.commands import CommandResult
from .context import GraphContext
from .reader import ConsoleLineReader, LineReader

logger = logging.getLogger(__name__)


class GraphConsole:
    """
    Runs the REPL over a ``GraphContext``.

    Args:
        context:   Shared graph, locks, console and executor.
        processor: Command dispatcher (defaults to the built-in commands).
        reader:    Input source (defaults to the terminal).
        sleep:     Used for the error pause; replaceable in tests.
    """

    def __init__(self, context: GraphContext,
                 processor: Optional[CommandProcessor] = None,
                 reader: Optional[LineReader] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self._context = context
        self._processor = processor or CommandProcessor()
        self._reader = reader or ConsoleLineReader(context.console)
        self._sleep = sleep

    def run(self) -> int:
        """
        Loop until ``exit``, end of input or a keyboard interrupt.

        Returns:
            The process exit code (always 0).
        """
        logger.info("Graph console started")
        try:
            while True:
                self._prompt()
                token = self._reader.read_line()
                result = self._processor.dispatch(token, self._context, self._reader)
                if result.is_exit:
                    break
                self._show(result)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, leaving console")
        finally:
            self._context.close()
        return 0

    def _prompt(self) -> None:
        context = self._context
        with context.output_lock:
            context.console.print(context.config.banner, style="banner")
            context.graph.notify_observers()

    def _show(self, result: CommandResult) -> None:
        context = self._context
        if result.message:
            if result.success:
                context.console.print(result.message)
            else:
                context.print_error(result.message)
        if result.pause and context.config.error_delay > 0:
            self._sleep(context.config.error_delay)
