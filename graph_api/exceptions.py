"""Exceptions raised by graph store operations."""


class GraphError(Exception):
    """Base exception for graph store operations."""
    pass


class EndpointNotFoundError(GraphError):
    """Raised when one or both endpoints of an edge are not in the graph."""
    def __init__(self, source_name: str, destination_name: str):
        self.source_name = source_name
        self.destination_name = destination_name
        super().__init__("One or both nodes not found")


class EdgeNotFoundError(GraphError):
    """Raised when no edge connects two existing nodes."""
    def __init__(self, source_name: str, destination_name: str):
        self.source_name = source_name
        self.destination_name = destination_name
        super().__init__(f"Edge '{source_name} -> {destination_name}' not found")


class NodeNotFoundError(GraphError):
    """Raised when a node is not found."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Node '{name}' not found")
