from django.urls import path

from events.handlers import (
    EventDetailView,
    EventListView,
    EventPriceView,
    EventsByDateView,
    EventsByPriceView,
    EventsByTagView,
    UpcomingEventListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/upcoming", UpcomingEventListView.as_view(), name="event-upcoming"),
    path("events/by-tag", EventsByTagView.as_view(), name="event-by-tag"),
    path("events/by-price", EventsByPriceView.as_view(), name="event-by-price"),
    path("events/by-date", EventsByDateView.as_view(), name="event-by-date"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/price",
        EventPriceView.as_view(),
        name="event-price",
    ),
]
