"""
    Console configuration — delays, matrix layout, observer behaviour.

    A plain dataclass passed to the console at startup.  There are no
    config files or environment variables; ``__main__`` fills it from
    command-line options.
"""
from dataclasses import dataclass
from typing import Optional

COMMAND_BANNER = "Commands (add_node, add_edge, add_weight, info, print, exit)"


@dataclass
class ConsoleConfig:
    """
    Top-level configuration for the graph console.

    Attributes:
        error_delay:              Seconds to pause after an unknown command
                                  or a failed ``info`` lookup.
        cell_width:               Column width of rendered matrices.
        observer_uses_graph_lock: Take the graph summary under the same lock
                                  as commands.  When ``False`` the observer
                                  reads the graph unsynchronised and may see
                                  it between two steps of a command.
        observer_workers:         ``max_workers`` of the observer thread pool
                                  (``None`` lets the executor decide).
        banner:                   Line printed before every prompt.
    """
    error_delay: float = 2.0
    cell_width: int = 4
    observer_uses_graph_lock: bool = True
    observer_workers: Optional[int] = None
    banner: str = COMMAND_BANNER
