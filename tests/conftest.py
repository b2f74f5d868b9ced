# tests/conftest.py
"""
Shared test fixtures.
Stub graph: three people (X, Y, Z) with two weighted edges.
Console fixtures write to an in-memory rich console.
"""
import io
from typing import List

import pytest

from graph_api.models.graph import Graph
from graph_console.config import ConsoleConfig
from graph_console.context import GraphContext, create_console


def build_stub_graph() -> Graph:
    """
        X --knows(3)--> Y --likes(1)--> Z
    """
    g = Graph()
    g.add_node("X", "first person")
    g.add_node("Y", "second person")
    g.add_node("Z", "third person")
    g.add_edge("X", "Y", "knows")
    g.add_edge("Y", "Z", "likes")
    g.set_weight("X", "Y", 3)
    return g


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def empty_graph() -> Graph:
    return Graph()


@pytest.fixture
def stub_graph() -> Graph:
    """Freshly built each time, safe to mutate."""
    return build_stub_graph()


@pytest.fixture
def make_context():
    """Factory for contexts with captured output and no error delay."""
    contexts: List[GraphContext] = []

    def _make(graph: Graph = None, **config_overrides) -> GraphContext:
        config_overrides.setdefault("error_delay", 0)
        context = GraphContext(
            graph=graph if graph is not None else Graph(),
            config=ConsoleConfig(**config_overrides),
            console=create_console(file=io.StringIO(), width=200),
        )
        contexts.append(context)
        return context

    yield _make
    for context in contexts:
        context.close()


@pytest.fixture
def context(make_context) -> GraphContext:
    return make_context()


@pytest.fixture
def stub_context(make_context) -> GraphContext:
    return make_context(build_stub_graph())
