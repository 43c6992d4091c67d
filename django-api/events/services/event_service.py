"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Query results that carry a date-time are ordered ascending by it, with
undated events last.
"""

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Iterable

import structlog

from events.domain import (
    Event,
    EventId,
    EventNotFoundError,
    InvalidArgumentError,
    InvalidEventIdError,
    Money,
)
from events.stores.interfaces import EventStore

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EventService:
    """Service for event catalog operations."""

    def __init__(
        self,
        store: EventStore,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._clock = clock or _utcnow

    def create_event(self, event: Event) -> Event:
        """Store a new event, generating an ID when it has none."""
        if event.id is None:
            event = replace(event, id=EventId.generate())
        saved = self._store.save_event(event)
        logger.info("event_created", event_id=str(saved.id))
        return saved

    def get_event(self, event_id: EventId | str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = _parse_event_id(event_id)
        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(str(parsed))
        return event

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def update_event(self, event_id: EventId | str, event: Event) -> Event:
        """Replace the stored event with ``event`` under ``event_id``.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = self._require_existing(event_id)
        saved = self._store.save_event(replace(event, id=parsed))
        logger.info("event_updated", event_id=str(parsed))
        return saved

    def delete_event(self, event_id: EventId | str) -> None:
        """Remove an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = self._require_existing(event_id)
        self._store.delete_event(parsed)
        logger.info("event_deleted", event_id=str(parsed))

    def partial_update_event(self, event_id: EventId | str, patch: Event) -> Event:
        """Merge the fields set on ``patch`` into the stored event.

        A field counts as set when it is not None, except ``tags`` which must
        be non-empty and ``duration_minutes`` which must be positive. The ID
        on ``patch`` is ignored.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        existing = self.get_event(event_id)
        changes = {}
        if patch.event_name is not None:
            changes["event_name"] = patch.event_name
        if patch.tags:
            changes["tags"] = patch.tags
        if patch.ticket_price is not None:
            changes["ticket_price"] = patch.ticket_price
        if patch.event_date_time is not None:
            changes["event_date_time"] = patch.event_date_time
        if patch.duration_minutes > 0:
            changes["duration_minutes"] = patch.duration_minutes

        saved = self._store.save_event(replace(existing, **changes))
        logger.info(
            "event_partially_updated",
            event_id=str(existing.id),
            fields=sorted(changes),
        )
        return saved

    def get_events_by_tag(self, tag: str | None) -> list[Event]:
        """Return events carrying ``tag``, compared trimmed and case-insensitively.

        Raises:
            InvalidArgumentError: If the tag is missing or blank.
        """
        if tag is None or not tag.strip():
            raise InvalidArgumentError("Tag must not be blank")
        return _by_date(e for e in self._store.list_events() if e.has_tag(tag))

    def get_upcoming_events(self) -> list[Event]:
        """Return events scheduled at or after the current instant."""
        now = self._clock()
        return _by_date(
            e
            for e in self._store.list_events()
            if e.event_date_time is not None and e.event_date_time >= now
        )

    def get_events_by_price_range(
        self,
        min_price: Decimal | None,
        max_price: Decimal | None,
    ) -> list[Event]:
        """Return events priced within ``[min_price, max_price]``.

        Ordered by price, then by date-time.

        Raises:
            InvalidArgumentError: If a bound is missing, negative or not
                finite, or min_price is greater than max_price.
        """
        low = _require_price(min_price, "Minimum price")
        high = _require_price(max_price, "Maximum price")
        if low.amount > high.amount:
            raise InvalidArgumentError(
                "Minimum price must not be greater than maximum price"
            )

        matches = [
            e
            for e in self._store.list_events()
            if e.ticket_price is not None
            and low.amount <= e.ticket_price <= high.amount
        ]
        return sorted(_by_date(matches), key=lambda e: e.ticket_price)

    def get_events_by_date_range(
        self,
        start: datetime | None,
        end: datetime | None,
    ) -> list[Event]:
        """Return events scheduled within ``[start, end]``.

        Raises:
            InvalidArgumentError: If a bound is missing or naive, or start is
                after end.
        """
        if start is None or end is None:
            raise InvalidArgumentError("Start and end dates are required")
        if start.tzinfo is None or end.tzinfo is None:
            raise InvalidArgumentError("Start and end dates must be timezone-aware")
        if start > end:
            raise InvalidArgumentError("Start date must not be after end date")

        return _by_date(
            e
            for e in self._store.list_events()
            if e.event_date_time is not None and start <= e.event_date_time <= end
        )

    def update_event_price(
        self,
        event_id: EventId | str | None,
        new_price: Decimal | None,
    ) -> Event:
        """Set a new ticket price on an event.

        Raises:
            InvalidArgumentError: If the ID or price is missing, or the
                price is negative or not finite.
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        if event_id is None:
            raise InvalidArgumentError("Event ID is required")
        price = _require_price(new_price, "New price")

        existing = self.get_event(event_id)
        saved = self._store.save_event(replace(existing, ticket_price=price.amount))
        logger.info(
            "event_price_updated",
            event_id=str(existing.id),
            ticket_price=str(price),
        )
        return saved

    def _require_existing(self, event_id: EventId | str) -> EventId:
        parsed = _parse_event_id(event_id)
        if not self._store.event_exists(parsed):
            raise EventNotFoundError(str(parsed))
        return parsed


def _parse_event_id(event_id: EventId | str) -> EventId:
    if isinstance(event_id, EventId):
        return event_id
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError) as err:
        raise InvalidEventIdError() from err


def _require_price(amount: Decimal | None, label: str) -> Money:
    if amount is None:
        raise InvalidArgumentError(f"{label} is required")
    try:
        return Money(amount=amount)
    except ValueError as err:
        raise InvalidArgumentError(
            f"{label} must be a finite, non-negative amount"
        ) from err


def _by_date(events: Iterable[Event]) -> list[Event]:
    dated = []
    undated = []
    for event in events:
        (undated if event.event_date_time is None else dated).append(event)
    dated.sort(key=lambda e: e.event_date_time)
    return dated + undated
