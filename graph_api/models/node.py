"""
    Node model - a named entity of the graph.
"""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Node:
    """
    Immutable node of the graph.

    Two nodes are equal if they have the same name; the description
    does not take part in identity, so a node replaced with a new
    description still matches the edges created for the old one.
    """
    name: str
    description: str = field(default="", compare=False)

    def __repr__(self) -> str:
        return f"Node({self.name})"
