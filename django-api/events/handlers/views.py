"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import DomainError, EventNotFoundError, InvalidArgumentError
from events.handlers.serializers import (
    DateRangeQuerySerializer,
    EventSerializer,
    PriceRangeQuerySerializer,
    PriceUpdateSerializer,
    TagQuerySerializer,
)
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


def error_response(error: DomainError) -> Response:
    """Translate a domain error into a JSON error response."""
    if isinstance(error, EventNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, InvalidArgumentError):
        code = status.HTTP_400_BAD_REQUEST
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return Response(
        {"code": error.code.value, "message": error.message}, status=code
    )


def _events_response(events) -> Response:
    return Response(EventSerializer(events, many=True).data)


class EventListView(APIView):
    """Handler for GET and POST /api/events"""

    def get(self, request: Request) -> Response:
        return _events_response(get_event_service().list_events())

    def post(self, request: Request) -> Response:
        serializer = EventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().create_event(serializer.to_event())
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET, PUT, PATCH and DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            event = get_event_service().get_event(event_id)
        except DomainError as err:
            return error_response(err)
        return Response(EventSerializer(event).data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            event = get_event_service().update_event(event_id, serializer.to_event())
        except DomainError as err:
            return error_response(err)
        return Response(EventSerializer(event).data)

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = EventSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        try:
            event = get_event_service().partial_update_event(
                event_id, serializer.to_event()
            )
        except DomainError as err:
            return error_response(err)
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        try:
            get_event_service().delete_event(event_id)
        except DomainError as err:
            return error_response(err)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventPriceView(APIView):
    """Handler for PATCH /api/events/{event_id}/price"""

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = PriceUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            event = get_event_service().update_event_price(
                event_id, serializer.validated_data["ticket_price"]
            )
        except DomainError as err:
            return error_response(err)
        return Response(EventSerializer(event).data)


class UpcomingEventListView(APIView):
    """Handler for GET /api/events/upcoming"""

    def get(self, request: Request) -> Response:
        return _events_response(get_event_service().get_upcoming_events())


class EventsByTagView(APIView):
    """Handler for GET /api/events/by-tag?tag="""

    def get(self, request: Request) -> Response:
        query = TagQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        try:
            events = get_event_service().get_events_by_tag(
                query.validated_data.get("tag")
            )
        except DomainError as err:
            return error_response(err)
        return _events_response(events)


class EventsByPriceView(APIView):
    """Handler for GET /api/events/by-price?min=&max="""

    def get(self, request: Request) -> Response:
        query = PriceRangeQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        try:
            events = get_event_service().get_events_by_price_range(
                query.validated_data.get("min"), query.validated_data.get("max")
            )
        except DomainError as err:
            return error_response(err)
        return _events_response(events)


class EventsByDateView(APIView):
    """Handler for GET /api/events/by-date?start=&end="""

    def get(self, request: Request) -> Response:
        query = DateRangeQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        try:
            events = get_event_service().get_events_by_date_range(
                query.validated_data.get("start"), query.validated_data.get("end")
            )
        except DomainError as err:
            return error_response(err)
        return _events_response(events)
