"""
    Observer contract for graph notifications.
    Pattern: Observer.
"""
from abc import ABC, abstractmethod
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .models.graph import Graph


class Observer(ABC):
    """
        Abstract base class for graph listeners.

        Observers are registered on a ``Graph`` and called by
        ``Graph.notify_observers()``.  An implementation may do its work
        synchronously or hand it off to another thread; the return value
        is passed back to the caller unchanged (e.g. a ``Future``).
    """

    @abstractmethod
    def update(self, graph: 'Graph') -> Any:
        """
        Called with the graph that sent the notification.

        Args:
            graph: The notifying graph.
        """
        pass
