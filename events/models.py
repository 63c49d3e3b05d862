"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models
from django.db.models import Q


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    status = models.CharField(max_length=50, blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    date_start = models.DateTimeField(blank=True, null=True)
    date_end = models.DateTimeField(blank=True, null=True)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    image_id = models.CharField(max_length=255, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="event_created_at_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(image_url__isnull=True, image_id__isnull=True)
                    | Q(
                        image_url__isnull=False,
                        image_url__gt="",
                        image_id__isnull=False,
                        image_id__gt="",
                    )
                ),
                name="event_image_fields_paired",
            ),
        ]

    def __str__(self) -> str:
        return self.title
