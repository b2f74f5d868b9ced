"""
    Edge model - a directed, weighted relationship between two nodes.
"""
from dataclasses import dataclass

from .node import Node


@dataclass(eq=False)
class Edge:
    """
    Directed edge from ``source`` to ``destination``.

    Edges compare by identity: two edges with the same endpoints and
    relationship are still distinct entries of the graph.  ``weight`` is
    the only field that changes after creation.
    """
    source: Node
    destination: Node
    relationship: str = ""
    weight: int = 1

    def connects(self, source: Node, destination: Node) -> bool:
        """Check if the edge goes from ``source`` to ``destination``"""
        return self.source == source and self.destination == destination

    def is_self_loop(self) -> bool:
        return self.source == self.destination

    def describe(self) -> str:
        """Short ``source -> destination`` label used in summaries"""
        return f"{self.source.name} -> {self.destination.name}"

    def __repr__(self) -> str:
        return f"Edge({self.describe()}, relationship={self.relationship!r}, weight={self.weight})"
