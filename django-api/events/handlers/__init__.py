from events.handlers.views import (
    EventDetailView,
    EventListView,
    EventPriceView,
    EventsByDateView,
    EventsByPriceView,
    EventsByTagView,
    UpcomingEventListView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventPriceView",
    "UpcomingEventListView",
    "EventsByTagView",
    "EventsByPriceView",
    "EventsByDateView",
]
