# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Local file storage for post images."""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from pathlib import Path

from werkzeug.utils import secure_filename

from mini_linkedin.application.interfaces import ImageStorage, UploadedImage
from mini_linkedin.shared.errors.base import ValidationError
from mini_linkedin.shared.logging import logger


class UnsupportedImageError(ValidationError):
    default_message = "Only image files are allowed."
    default_code = "image_type_not_allowed"


class ImageTooLargeError(ValidationError):
    default_message = "File size too large. Please select a smaller image (max 5MB)."
    default_code = "image_too_large"


class LocalImageStorage(ImageStorage):
    """Stores images on the local filesystem within the configured root."""

    def __init__(
        self,
        root: Path,
        *,
        allowed_extensions: Iterable[str] = ("png", "jpg", "jpeg", "gif", "webp"),
        url_prefix: str = "/uploads",
        max_bytes: int | None = None,
    ) -> None:
        self._root = root
        self._root.mkdir(parents=True, exist_ok=True)
        self._allowed = {ext.lower() for ext in allowed_extensions}
        self._url_prefix = url_prefix.rstrip("/")
        self._max_bytes = max_bytes

    @property
    def root(self) -> Path:
        return self._root

    def _resolve(self, relative_path: str) -> Path:
        path = (self._root / relative_path).resolve()
        if not path.is_relative_to(self._root.resolve()):
            msg = "Attempted directory traversal outside storage root"
            raise ValueError(msg)
        return path

    def _extension(self, image: UploadedImage) -> str:
        name = secure_filename(image.filename or "")
        ext = name.rsplit(".", 1)[-1].lower() if "." in name else ""
        if ext not in self._allowed:
            raise UnsupportedImageError()
        if image.content_type and not image.content_type.startswith("image/"):
            raise UnsupportedImageError()
        return ext

    def save(self, image: UploadedImage) -> str:
        ext = self._extension(image)
        if self._max_bytes is not None and len(image.data) > self._max_bytes:
            max_mb = max(1, self._max_bytes // (1024 * 1024))
            raise ImageTooLargeError(
                f"File size too large. Please select a smaller image (max {max_mb}MB)."
            )
        filename = f"image-{uuid.uuid4().hex}.{ext}"
        file_path = self._resolve(filename)
        file_path.write_bytes(image.data)
        logger.debug(f"storage: write path={file_path} size={len(image.data)}")
        return f"{self._url_prefix}/{filename}"

    def delete(self, url: str) -> None:
        prefix = f"{self._url_prefix}/"
        if not url.startswith(prefix):
            return
        try:
            file_path = self._resolve(url[len(prefix):])
        except ValueError:
            logger.warning(f"storage: refusing to delete outside root url={url}")
            return
        file_path.unlink(missing_ok=True)
        logger.debug(f"storage: delete path={file_path}")


__all__ = ["ImageTooLargeError", "LocalImageStorage", "UnsupportedImageError"]
