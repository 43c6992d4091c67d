"""Serializers for transforming domain models to API responses and back.

Serializers only check formats. Business rules live in the service.
"""

from rest_framework import serializers

from events.domain import Event, EventId


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(required=False, allow_null=True)
    event_name = serializers.CharField(
        max_length=255, required=False, allow_null=True, allow_blank=True
    )
    tags = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False
    )
    ticket_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, allow_null=True
    )
    event_date_time = serializers.DateTimeField(required=False, allow_null=True)
    duration_minutes = serializers.IntegerField(required=False)

    def to_event(self) -> Event:
        """Build a domain Event from validated data; omitted fields stay unset."""
        data = self.validated_data
        event_id = data.get("id")
        return Event(
            id=EventId(value=event_id) if event_id is not None else None,
            event_name=data.get("event_name"),
            tags=tuple(data.get("tags") or ()),
            ticket_price=data.get("ticket_price"),
            event_date_time=data.get("event_date_time"),
            duration_minutes=data.get("duration_minutes", 0),
        )


class PriceUpdateSerializer(serializers.Serializer):
    """Body of a price update request."""

    ticket_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, allow_null=True
    )


class TagQuerySerializer(serializers.Serializer):
    tag = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)


class PriceRangeQuerySerializer(serializers.Serializer):
    min = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    max = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)


class DateRangeQuerySerializer(serializers.Serializer):
    start = serializers.DateTimeField(required=False)
    end = serializers.DateTimeField(required=False)
