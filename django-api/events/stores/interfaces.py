"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def save_event(self, event: Event) -> Event:
        """Insert or fully replace the event keyed by ``event.id`` and return it."""
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in the store's native order."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> None:
        """Remove an event. Deleting a missing ID is a no-op."""
        ...
