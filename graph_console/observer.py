"""
    GraphObserver — prints a node / edge summary on a worker thread.

    Design Pattern: Observer
    ────────────────────────
    Registered on the ``Graph``; every ``notify_observers()`` call submits
    one summary task to the executor and returns immediately with its
    ``Future``.  Nothing waits for the task.
"""
import logging
import threading
from concurrent.futures import Executor, Future
from typing import Optional

from rich.console import Console

from graph_api.models.graph import Graph, GraphSummary
from graph_api.observers import Observer

from .context import GraphContext

logger = logging.getLogger(__name__)


class GraphObserver(Observer):
    """
    Reports the current nodes and edges of the graph.

    Args:
        executor:    Where summary tasks run.
        console:     Output console.
        output_lock: Held while the two summary lines are printed.
        graph_lock:  If given, the summary is read under this lock;
                     otherwise the read races with running commands.
    """

    def __init__(self, executor: Executor, console: Console,
                 output_lock: threading.Lock,
                 graph_lock: Optional[threading.RLock] = None):
        self._executor = executor
        self._console = console
        self._output_lock = output_lock
        self._graph_lock = graph_lock

    @classmethod
    def from_context(cls, context: GraphContext) -> 'GraphObserver':
        graph_lock = context.graph_lock if context.config.observer_uses_graph_lock else None
        return cls(context.executor, context.console, context.output_lock, graph_lock)

    def update(self, graph: Graph) -> Future:
        return self._executor.submit(self._report, graph)

    def _report(self, graph: Graph) -> GraphSummary:
        try:
            if self._graph_lock is not None:
                with self._graph_lock:
                    summary = graph.snapshot_summary()
            else:
                summary = graph.snapshot_summary()

            with self._output_lock:
                self._console.print(summary.format_nodes(), style="summary")
                self._console.print(summary.format_edges(), style="summary")
        except Exception:
            # the loop never reads the future
            logger.exception("Graph summary failed")
            raise
        return summary
