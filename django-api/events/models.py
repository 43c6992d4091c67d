"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event_name = models.CharField(max_length=255, blank=True, null=True)
    tags = models.JSONField(default=list, blank=True)
    ticket_price = models.DecimalField(
        max_digits=10, decimal_places=2, blank=True, null=True
    )
    event_date_time = models.DateTimeField(blank=True, null=True)
    duration_minutes = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["event_date_time"], name="events_event_date_idx"),
            models.Index(fields=["ticket_price"], name="events_ticket_price_idx"),
        ]

    def __str__(self) -> str:
        return self.event_name or str(self.id)
