"""Django ORM implementation of the EventStore.

Prices must fit the ``ticket_price`` column exactly; anything the column
would round or overflow is rejected with InvalidArgumentError.
"""

from decimal import Decimal

from django.core.exceptions import ValidationError

from events import models as orm
from events.domain import Event, EventId, InvalidArgumentError
from events.stores.interfaces import EventStore


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def save_event(self, event: Event) -> Event:
        if event.id is None:
            raise ValueError("Cannot store an event without an id")
        row, _ = orm.Event.objects.update_or_create(
            id=event.id.value,
            defaults={
                "event_name": event.event_name,
                "tags": list(event.tags),
                "ticket_price": _column_price(event.ticket_price),
                "event_date_time": event.event_date_time,
                "duration_minutes": event.duration_minutes,
            },
        )
        row.refresh_from_db()
        return _to_domain(row)

    def list_events(self) -> list[Event]:
        return [_to_domain(row) for row in orm.Event.objects.all()]

    def get_event(self, event_id: EventId) -> Event | None:
        row = orm.Event.objects.filter(id=event_id.value).first()
        return _to_domain(row) if row is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        return orm.Event.objects.filter(id=event_id.value).exists()

    def delete_event(self, event_id: EventId) -> None:
        orm.Event.objects.filter(id=event_id.value).delete()


def _column_price(price: Decimal | None) -> Decimal | None:
    if price is None:
        return None
    field = orm.Event._meta.get_field("ticket_price")
    try:
        field.run_validators(Decimal(price))
    except ValidationError as err:
        raise InvalidArgumentError(
            f"Ticket price must have at most {field.max_digits} digits "
            f"and {field.decimal_places} decimal places"
        ) from err
    return price


def _to_domain(row: orm.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        event_name=row.event_name,
        tags=tuple(row.tags or ()),
        ticket_price=row.ticket_price,
        event_date_time=row.event_date_time,
        duration_minutes=row.duration_minutes,
    )
