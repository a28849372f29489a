# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .interfaces import ImageStorage, UploadedImage

__all__ = [
    "ImageStorage",
    "UploadedImage",
]
