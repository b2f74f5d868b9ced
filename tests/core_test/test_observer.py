# tests/core_test/test_observer.py
"""
Tests for GraphObserver (graph_console/observer.py) and GraphContext.
"""
import threading
from concurrent.futures import Future, TimeoutError as FutureTimeout

import pytest

from graph_console.context import GraphContext
from graph_console.observer import GraphObserver


def _output(context):
    return context.console.file.getvalue()


class TestGraphObserver:

    def test_update_returns_future(self, stub_context):
        observer = GraphObserver.from_context(stub_context)
        future = observer.update(stub_context.graph)
        assert isinstance(future, Future)
        summary = future.result(timeout=5)
        assert summary.node_names == ("X", "Y", "Z")

    def test_prints_summary(self, stub_context):
        observer = GraphObserver.from_context(stub_context)
        observer.update(stub_context.graph).result(timeout=5)
        out = _output(stub_context)
        assert "Nodes: 3 (X, Y, Z)" in out
        assert "Edges: 2 (X -> Y, Y -> Z)" in out

    def test_registered_through_graph(self, stub_context):
        stub_context.graph.add_observer(GraphObserver.from_context(stub_context))
        [future] = stub_context.graph.notify_observers()
        future.result(timeout=5)
        assert "Nodes: 3" in _output(stub_context)

    def test_locked_observer_waits_for_graph_lock(self, stub_context):
        observer = GraphObserver.from_context(stub_context)
        with stub_context.graph_lock:
            future = observer.update(stub_context.graph)
            with pytest.raises(FutureTimeout):
                future.result(timeout=0.2)
            stub_context.graph.add_node("W", "added while locked")
        summary = future.result(timeout=5)
        assert "W" in summary.node_names

    def test_unlocked_observer_reads_without_lock(self, make_context):
        context = make_context(observer_uses_graph_lock=False)
        context.graph.add_node("A", "a")
        observer = GraphObserver.from_context(context)
        with context.graph_lock:
            summary = observer.update(context.graph).result(timeout=5)
        assert summary.node_names == ("A",)

    def test_waits_for_output_lock(self, stub_context):
        observer = GraphObserver.from_context(stub_context)
        with stub_context.output_lock:
            future = observer.update(stub_context.graph)
            with pytest.raises(FutureTimeout):
                future.result(timeout=0.2)
            assert "Nodes:" not in _output(stub_context)
        future.result(timeout=5)
        assert "Nodes:" in _output(stub_context)

    def test_failure_is_logged_and_kept_in_future(self, stub_context, caplog):
        class _BrokenConsole:
            def print(self, *args, **kwargs):
                raise OSError("console closed")

        observer = GraphObserver(stub_context.executor, _BrokenConsole(),
                                 stub_context.output_lock, stub_context.graph_lock)
        future = observer.update(stub_context.graph)
        assert isinstance(future.exception(timeout=5), OSError)
        assert "Graph summary failed" in caplog.text
        assert "console closed" in caplog.text
        assert stub_context.output_lock.acquire(blocking=False)
        stub_context.output_lock.release()


class TestGraphContext:

    def test_defaults(self):
        context = GraphContext()
        try:
            assert context.graph.get_number_of_nodes() == 0
            assert context.config.error_delay == 2.0
            assert context.executor is not None
        finally:
            context.close()

    def test_graph_lock_is_reentrant(self, context):
        with context.graph_lock:
            assert context.graph_lock.acquire(blocking=False)
            context.graph_lock.release()

    def test_observer_threads_are_named(self, context):
        name = context.executor.submit(lambda: threading.current_thread().name).result(timeout=5)
        assert name.startswith("graph-observer")

    def test_print_error(self, context):
        context.print_error("[bad] thing")
        assert "[bad] thing" in _output(context)
