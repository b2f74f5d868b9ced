"""
    Graph model - the in-memory store of nodes and weighted edges.
    Supports node upsert, edge creation, weight assignment and
    adjacency / incidence matrix rendering.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..exceptions import EdgeNotFoundError, EndpointNotFoundError, NodeNotFoundError
from ..observers import Observer
from .edge import Edge
from .node import Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphSummary:
    """
    Read-only view of the graph used for reporting.

    Attributes:
        node_names:        Node names in enumeration order.
        edge_descriptions: ``"source -> destination"`` per edge, in insertion order.
    """
    node_names: Tuple[str, ...]
    edge_descriptions: Tuple[str, ...]

    def format_nodes(self) -> str:
        return f"Nodes: {len(self.node_names)} ({', '.join(self.node_names)})"

    def format_edges(self) -> str:
        return f"Edges: {len(self.edge_descriptions)} ({', '.join(self.edge_descriptions)})"


class Graph:
    """
        Directed, weighted graph.

        Nodes are keyed by name and enumerated in insertion order (an
        overwritten node keeps its position).  Edges are kept in insertion
        order, which is also the column order of the incidence matrix.

        The graph does no locking of its own; callers that share it between
        threads coordinate through ``graph_console.context.GraphContext``.
    """

    def __init__(self):
        self.nodes: Dict[str, Node] = {}  # name -> Node
        self.edges: List[Edge] = []
        self._observers: List[Observer] = []

    # ── Nodes ────────────────────────────────────────────────────

    def add_node(self, name: str, description: str) -> Node:
        """
        Add a node, or overwrite the description of an existing one.

        Returns:
            The stored node.
        """
        node = Node(name, description)
        if name in self.nodes:
            logger.info("Node '%s' already exists, description overwritten", name)
        self.nodes[name] = node
        return node

    def get_node(self, name: str) -> Optional[Node]:
        return self.nodes.get(name)

    def describe(self, name: str) -> str:
        """
        Return the description of a node.

        Raises:
            NodeNotFoundError: If no node has this name.
        """
        node = self.nodes.get(name)
        if node is None:
            raise NodeNotFoundError(name)
        return node.description

    # ── Edges ────────────────────────────────────────────────────

    def add_edge(self, source_name: str, destination_name: str,
                 relationship: str) -> Edge:
        """
        Append a new edge with weight 1.

        Raises:
            EndpointNotFoundError: If either endpoint is missing.  The graph
                                   is left unchanged.
        """
        source, destination = self._resolve_endpoints(source_name, destination_name)
        edge = Edge(source, destination, relationship)
        self.edges.append(edge)
        logger.debug("Edge added: %r", edge)
        return edge

    def find_edge(self, source_name: str, destination_name: str) -> Optional[Edge]:
        """First edge from ``source_name`` to ``destination_name``, in insertion order."""
        source = self.nodes.get(source_name)
        destination = self.nodes.get(destination_name)
        if source is None or destination is None:
            return None
        return self._first_edge(source, destination)

    def set_weight(self, source_name: str, destination_name: str,
                   weight: int) -> Edge:
        """
        Set the weight of the first edge between two nodes.

        Raises:
            EndpointNotFoundError: If either endpoint is missing.
            EdgeNotFoundError:     If the nodes exist but no edge connects them.
        """
        source, destination = self._resolve_endpoints(source_name, destination_name)
        edge = self._first_edge(source, destination)
        if edge is None:
            raise EdgeNotFoundError(source_name, destination_name)
        edge.weight = weight
        logger.debug("Weight set: %r", edge)
        return edge

    def get_number_of_nodes(self) -> int:
        return len(self.nodes)

    def get_number_of_edges(self) -> int:
        return len(self.edges)

    # ── Matrices ─────────────────────────────────────────────────

    def adjacency_matrix(self) -> List[List[int]]:
        """
        Node × node grid: cell (i, j) is the weight of the first edge
        from node i to node j, or 0 if there is none.
        """
        nodes = list(self.nodes.values())
        matrix = []
        for source in nodes:
            row = []
            for destination in nodes:
                edge = self._first_edge(source, destination)
                row.append(edge.weight if edge is not None else 0)
            matrix.append(row)
        return matrix

    def incidence_matrix(self) -> List[List[int]]:
        """
        Node × edge grid: +weight where the node is the source of the edge,
        -weight where it is the destination, 0 otherwise.

        The source is checked first, so a self-loop gives +weight.
        """
        matrix = []
        for node in self.nodes.values():
            row = []
            for edge in self.edges:
                if edge.source == node:
                    row.append(edge.weight)
                elif edge.destination == node:
                    row.append(-edge.weight)
                else:
                    row.append(0)
            matrix.append(row)
        return matrix

    def render_adjacency_matrix(self, cell_width: int = 4) -> str:
        names = list(self.nodes)
        return self._render("Adjacency matrix:", names, names,
                            self.adjacency_matrix(), cell_width)

    def render_incidence_matrix(self, cell_width: int = 4) -> str:
        columns = [str(i + 1) for i in range(len(self.edges))]
        return self._render("Incidence matrix:", list(self.nodes), columns,
                            self.incidence_matrix(), cell_width)

    @staticmethod
    def _render(title: str, row_labels: Sequence[str], column_labels: Sequence[str],
                matrix: List[List[int]], cell_width: int) -> str:
        def cell(value: Any) -> str:
            return f"{value!s:<{cell_width}}"

        lines = [title, (" " * cell_width + "".join(cell(c) for c in column_labels)).rstrip()]
        for label, row in zip(row_labels, matrix):
            lines.append((cell(label) + "".join(cell(v) for v in row)).rstrip())
        return "\n".join(lines)

    # ── Reporting ────────────────────────────────────────────────

    def snapshot_summary(self) -> GraphSummary:
        """Copy node names and edge labels into an immutable summary."""
        nodes = tuple(self.nodes)
        edges = tuple(edge.describe() for edge in list(self.edges))
        return GraphSummary(nodes, edges)

    # ── Observer pattern ─────────────────────────────────────────

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Remove a previously registered observer."""
        if observer in self._observers:
            self._observers.remove(observer)

    def notify_observers(self) -> List[Any]:
        """
        Call ``update(self)`` on every registered observer.

        Returns:
            Whatever each observer returned, in registration order.
            A failing observer is logged and skipped.
        """
        results = []
        for observer in list(self._observers):
            try:
                results.append(observer.update(self))
            except Exception as exc:
                logger.error("Observer %r failed: %s", observer, exc)
        return results

    # ── Helpers ──────────────────────────────────────────────────

    def _resolve_endpoints(self, source_name: str,
                           destination_name: str) -> Tuple[Node, Node]:
        source = self.nodes.get(source_name)
        destination = self.nodes.get(destination_name)
        if source is None or destination is None:
            raise EndpointNotFoundError(source_name, destination_name)
        return source, destination

    def _first_edge(self, source: Node, destination: Node) -> Optional[Edge]:
        for edge in self.edges:
            if edge.connects(source, destination):
                return edge
        return None

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self.nodes)}, edges={len(self.edges)})"
