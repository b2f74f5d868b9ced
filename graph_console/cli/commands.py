"""
    CLI Commands — concrete command implementations.

    Design Pattern: Command
    ───────────────────────
    Each command is matched by a keyword and encapsulates one graph
    action.  Execution has two phases:
        • ``collect(reader) → dict``        — prompt for every field, no lock held
        • ``apply(context, **fields)``      — run under ``context.graph_lock``

    Collecting first keeps the graph lock from being held while the user
    is typing, and still makes every mutation atomic with respect to
    other commands.

    Supported commands:
    ───────────────────
        add_node     name, description
        add_edge     source, destination, relationship
        add_weight   source, destination, weight
        info         name
        print
        exit
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from graph_api.exceptions import EdgeNotFoundError, EndpointNotFoundError, NodeNotFoundError

from ..context import GraphContext
from ..reader import LineReader

logger = logging.getLogger(__name__)

ACTION_EXIT = "exit"


# ── Result wrapper ───────────────────────────────────────────────

@dataclass
class CommandResult:
    """
    Value object returned by every command execution.

    Attributes:
        success:  Whether the command completed without error.
        message:  Human-readable output (may be empty).
        pause:    Whether the console should wait before re-prompting.
        data:     Optional structured data, e.g. ``{"action": "exit"}``.
    """
    success: bool
    message: str = ""
    pause: bool = False
    data: Optional[Dict[str, Any]] = field(default_factory=dict)

    @property
    def is_exit(self) -> bool:
        return bool(self.data) and self.data.get("action") == ACTION_EXIT


# ── Abstract base ────────────────────────────────────────────────

class Command(ABC):
    """
    Abstract base for all CLI commands.

    Design Pattern: Command
    """

    keyword: str = ""

    def matches(self, token: str) -> bool:
        return token == self.keyword

    def execute(self, context: GraphContext, reader: LineReader) -> CommandResult:
        """
        Collect the fields, then apply them under the graph lock.

        A ``ValueError`` while collecting (e.g. a non-integer weight) is
        returned as a failed result.  ``EOFError`` propagates to the loop.
        """
        try:
            fields = self.collect(reader)
        except ValueError as e:
            logger.warning("Invalid input for '%s': %s", self.keyword, e)
            return CommandResult(False, f"Invalid input: {e}")

        with context.graph_lock:
            return self.apply(context, **fields)

    def collect(self, reader: LineReader) -> Dict[str, Any]:
        """Prompt for the fields of the command.  Most commands take none."""
        return {}

    @abstractmethod
    def apply(self, context: GraphContext, **fields: Any) -> CommandResult:
        """Run the command on ``context.graph``.  Called with the graph lock held."""
        ...


# ═════════════════════════════════════════════════════════════════
#  MUTATING COMMANDS
# ═════════════════════════════════════════════════════════════════

class AddNodeCommand(Command):
    """
    Add a node, or overwrite the description of an existing one.
    """

    keyword = "add_node"

    def collect(self, reader: LineReader) -> Dict[str, Any]:
        name = reader.read_line("Enter node name: ")
        description = reader.read_line("Enter node description: ")
        return {"name": name, "description": description}

    def apply(self, context: GraphContext, **fields: Any) -> CommandResult:
        name = fields["name"]
        existed = context.graph.get_node(name) is not None
        context.graph.add_node(name, fields["description"])
        verb = "updated" if existed else "added"
        logger.info("Node '%s' %s", name, verb)
        return CommandResult(True, f"Node '{name}' {verb}.")


class AddEdgeCommand(Command):
    """
    Add a directed edge with weight 1 between two existing nodes.
    """

    keyword = "add_edge"

    def collect(self, reader: LineReader) -> Dict[str, Any]:
        source = reader.read_line("Enter source node name: ")
        destination = reader.read_line("Enter destination node name: ")
        relationship = reader.read_line("Enter relationship description: ")
        return {"source": source, "destination": destination, "relationship": relationship}

    def apply(self, context: GraphContext, **fields: Any) -> CommandResult:
        try:
            edge = context.graph.add_edge(
                fields["source"], fields["destination"], fields["relationship"]
            )
        except EndpointNotFoundError as e:
            logger.warning("add_edge rejected: %s", e)
            return CommandResult(False, str(e))

        logger.info("Edge added: %s", edge.describe())
        return CommandResult(True, f"Edge '{edge.describe()}' added.")


class AddWeightCommand(Command):
    """
    Set the weight of the first edge between two nodes.
    """

    keyword = "add_weight"

    def collect(self, reader: LineReader) -> Dict[str, Any]:
        source = reader.read_line("Enter source node name: ")
        destination = reader.read_line("Enter destination node name: ")
        weight = reader.read_int("Enter edge weight: ")
        return {"source": source, "destination": destination, "weight": weight}

    def apply(self, context: GraphContext, **fields: Any) -> CommandResult:
        try:
            edge = context.graph.set_weight(
                fields["source"], fields["destination"], fields["weight"]
            )
        except (EndpointNotFoundError, EdgeNotFoundError) as e:
            logger.warning("add_weight rejected: %s", e)
            return CommandResult(False, str(e))

        logger.info("Weight of %s set to %d", edge.describe(), edge.weight)
        return CommandResult(True, "Edge weight set.")


# ═════════════════════════════════════════════════════════════════
#  INFORMATIONAL COMMANDS (no graph mutation)
# ═════════════════════════════════════════════════════════════════

class InfoCommand(Command):
    """
    Show the description of a node.  A missing node pauses the console.
    """

    keyword = "info"

    def collect(self, reader: LineReader) -> Dict[str, Any]:
        return {"name": reader.read_line("Enter node name to view its description: ")}

    def apply(self, context: GraphContext, **fields: Any) -> CommandResult:
        name = fields["name"]
        try:
            description = context.graph.describe(name)
        except NodeNotFoundError as e:
            return CommandResult(False, str(e), pause=True)
        return CommandResult(True, f"Description of node '{name}': {description}")


class PrintCommand(Command):
    """
    Render the adjacency matrix followed by the incidence matrix.
    """

    keyword = "print"

    def apply(self, context: GraphContext, **fields: Any) -> CommandResult:
        width = context.config.cell_width
        graph = context.graph
        text = (
            graph.render_adjacency_matrix(width)
            + "\n\n"
            + graph.render_incidence_matrix(width)
        )
        return CommandResult(True, text)


class ExitCommand(Command):
    """
    Stop the console loop.  The process exits with code 0.
    """

    keyword = "exit"

    def apply(self, context: GraphContext, **fields: Any) -> CommandResult:
        return CommandResult(True, "", data={"action": ACTION_EXIT})
