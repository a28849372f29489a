# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True, frozen=True)
class UploadedImage:
    filename: str
    content_type: str | None
    data: bytes


class ImageStorage(Protocol):
    def save(self, image: UploadedImage) -> str:
        """Persist the image and return the public URL it is served from."""
        ...

    def delete(self, url: str) -> None: ...
