"""Serializers for validating input and transforming domain models to API responses."""

from rest_framework import serializers

from events.domain import MERGEABLE_FIELDS, EventFields


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value", read_only=True)
    title = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True, allow_null=True)
    description = serializers.CharField(read_only=True, allow_null=True)
    date_start = serializers.DateTimeField(read_only=True, allow_null=True)
    date_end = serializers.DateTimeField(read_only=True, allow_null=True)
    image_url = serializers.CharField(read_only=True, allow_null=True)
    image_id = serializers.CharField(read_only=True, allow_null=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class EventCreateSerializer(serializers.Serializer):
    """Input rules for creating an event."""

    title = serializers.CharField(max_length=255)
    status = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    date_start = serializers.DateTimeField(required=False, allow_null=True)
    date_end = serializers.DateTimeField(required=False, allow_null=True)
    image = serializers.FileField(required=False, allow_null=True)

    def to_fields(self) -> EventFields:
        data = self.validated_data
        return EventFields(**{name: data.get(name) for name in MERGEABLE_FIELDS})

    def image_file(self):
        return self.validated_data.get("image")


class EventUpdateSerializer(EventCreateSerializer):
    """Input rules for updating an event. Every field may be omitted or blank."""

    title = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
