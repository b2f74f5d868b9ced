"""
    GraphContext — the graph and everything shared around it.

    One context is built at startup and handed to the command processor,
    the observers and the console loop, instead of a process-wide
    singleton.

    Locks
    ─────
    • graph_lock  – serialises the apply phase of every command, so two
                    commands never interleave their mutations.
    • output_lock – keeps "banner + observer trigger" and each observer
                    summary from interleaving on the console.
"""
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console
from rich.theme import Theme

from graph_api.models.graph import Graph

from .config import ConsoleConfig

logger = logging.getLogger(__name__)

CONSOLE_THEME = Theme({
    "error":   "red",
    "banner":  "bold cyan",
    "summary": "green",
})


def create_console(**kwargs) -> Console:
    """Console with the graph theme; markup and highlighting are off so names print verbatim."""
    kwargs.setdefault("theme", CONSOLE_THEME)
    kwargs.setdefault("markup", False)
    kwargs.setdefault("highlight", False)
    kwargs.setdefault("emoji", False)
    return Console(**kwargs)


@dataclass
class GraphContext:
    """
    Shared state of one console session.

    Attributes:
        graph:       The graph all commands operate on.
        config:      Console configuration.
        console:     Rich console used for all output.
        graph_lock:  Exclusive access to ``graph`` for command apply phases.
        output_lock: Coarse lock around console output blocks.
        executor:    Thread pool running observer tasks.
    """
    graph: Graph = field(default_factory=Graph)
    config: ConsoleConfig = field(default_factory=ConsoleConfig)
    console: Console = field(default_factory=create_console)
    graph_lock: threading.RLock = field(default_factory=threading.RLock)
    output_lock: threading.Lock = field(default_factory=threading.Lock)
    executor: Optional[ThreadPoolExecutor] = None

    def __post_init__(self):
        if self.executor is None:
            self.executor = ThreadPoolExecutor(
                max_workers=self.config.observer_workers,
                thread_name_prefix="graph-observer",
            )

    def print_error(self, message: str) -> None:
        self.console.print(message, style="error")

    def close(self, wait: bool = True) -> None:
        """Shut down the observer executor."""
        self.executor.shutdown(wait=wait)
        logger.debug("Observer executor shut down")
