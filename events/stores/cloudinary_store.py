"""Cloudinary implementation of the MediaStore."""

import logging
from collections.abc import Mapping
from typing import IO, Self

import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError
from django.conf import settings

from events.domain import ImageAsset
from events.domain.errors import MediaDeleteError, MediaUploadError
from events.stores.interfaces import MediaStore

logger = logging.getLogger(__name__)


class CloudinaryMediaStore(MediaStore):
    """Image host backed by a Cloudinary account.

    Credentials are passed on every call rather than through the SDK's
    process-wide ``cloudinary.config``.
    """

    def __init__(self, credentials: Mapping[str, str]) -> None:
        self._options = {**credentials, "secure": True}

    @classmethod
    def from_settings(cls) -> Self:
        return cls(settings.CLOUDINARY)

    def upload(self, image_file: IO[bytes], folder: str) -> ImageAsset:
        try:
            # ValueError covers missing credentials raised before any request.
            result = cloudinary.uploader.upload(
                image_file,
                folder=folder,
                resource_type="image",
                **self._options,
            )
        except (CloudinaryError, ValueError) as exc:
            raise MediaUploadError(folder) from exc

        try:
            return ImageAsset(url=result["secure_url"], image_id=result["public_id"])
        except (KeyError, ValueError) as exc:
            logger.warning("Cloudinary upload to %s returned no asset reference: %s", folder, result)
            raise MediaUploadError(folder) from exc

    def delete(self, image_id: str) -> None:
        try:
            result = cloudinary.uploader.destroy(
                image_id,
                resource_type="image",
                invalidate=True,
                **self._options,
            )
        except (CloudinaryError, ValueError) as exc:
            raise MediaDeleteError(image_id) from exc

        if result.get("result") != "ok":
            logger.warning("Cloudinary refused delete of %s: %s", image_id, result)
            raise MediaDeleteError(image_id)
