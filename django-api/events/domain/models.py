"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from events.domain.value_objects import EventId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event.

    Every field is optional so the same type describes a partial update:
    unset fields are None, an empty tag tuple, or a non-positive duration.
    """

    id: EventId | None = None
    event_name: str | None = None
    tags: tuple[str, ...] = ()
    ticket_price: Decimal | None = None
    event_date_time: datetime | None = None
    duration_minutes: int = 0

    def has_tag(self, tag: str) -> bool:
        """Return True if any tag matches ``tag`` ignoring case and surrounding whitespace."""
        wanted = normalize_tag(tag)
        return any(normalize_tag(t) == wanted for t in self.tags if t and t.strip())


def normalize_tag(tag: str) -> str:
    return tag.strip().lower()
