# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from mini_linkedin.application.interfaces import ImageStorage, UploadedImage
from mini_linkedin.domain.posts.entities import Post, validate_post_fields
from mini_linkedin.domain.posts.repositories import PostRepository
from mini_linkedin.shared.errors.base import ValidationError
from mini_linkedin.shared.logging import logger


class MissingImageError(ValidationError):
    default_message = "Please select an image for your post."
    default_code = "image_required"


class CreatePostUseCase:
    def __init__(self, *, posts: PostRepository, images: ImageStorage) -> None:
        self._posts = posts
        self._images = images

    def execute(
        self, author_id: str, *, title: str, content: str, image: UploadedImage | None
    ) -> Post:
        validate_post_fields(title, content)
        if image is None or not image.filename:
            raise MissingImageError()

        url = self._images.save(image)
        try:
            return self._posts.add(
                author_id=author_id,
                title=title.strip(),
                content=content.strip(),
                image=url,
            )
        except Exception:
            logger.warning(f"posts.create: rolling back stored image {url}")
            self._images.delete(url)
            raise
