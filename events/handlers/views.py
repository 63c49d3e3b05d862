"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Wrap results in the response envelope
- Never contain business logic
- Leave error mapping to events.handlers.exceptions
"""

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.dependencies import get_event_service
from events.handlers.responses import envelope_response
from events.handlers.serializers import (
    EventCreateSerializer,
    EventSerializer,
    EventUpdateSerializer,
)


class EventListView(APIView):
    """Handler for GET and POST /api/events"""

    def get(self, request: Request) -> Response:
        events = get_event_service().list_events()
        return envelope_response("Get event success", EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        event = get_event_service().create_event(serializer.to_fields(), serializer.image_file())
        return envelope_response("Add event success", EventSerializer(event).data)


class EventDetailView(APIView):
    """Handler for GET, PUT, PATCH and DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = get_event_service().get_event(event_id)
        return envelope_response("Get event success", EventSerializer(event).data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        event = get_event_service().update_event(
            event_id, serializer.to_fields(), serializer.image_file()
        )
        return envelope_response("Event updated", EventSerializer(event).data)

    def patch(self, request: Request, event_id: str) -> Response:
        return self.put(request, event_id)

    def delete(self, request: Request, event_id: str) -> Response:
        deleted_id = get_event_service().delete_event(event_id)
        return envelope_response("Delete event success", {"id": str(deleted_id)})
