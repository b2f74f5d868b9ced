"""
Graph Console API — models, errors and the observer contract.
"""
from .exceptions import (
    GraphError,
    EndpointNotFoundError,
    EdgeNotFoundError,
    NodeNotFoundError,
)
from .models.node import Node
from .models.edge import Edge
from .models.graph import Graph, GraphSummary
from .observers import Observer

__all__ = [
    'GraphError',
    'EndpointNotFoundError',
    'EdgeNotFoundError',
    'NodeNotFoundError',
    'Node',
    'Edge',
    'Graph',
    'GraphSummary',
    'Observer',
]
