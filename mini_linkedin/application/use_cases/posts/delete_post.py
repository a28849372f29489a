# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from mini_linkedin.application.interfaces import ImageStorage
from mini_linkedin.domain.ownership import OwnershipGuard
from mini_linkedin.domain.posts.exceptions import PostNotFoundError
from mini_linkedin.domain.posts.repositories import PostRepository
from mini_linkedin.shared.logging import logger


class DeletePostUseCase:
    def __init__(
        self, *, posts: PostRepository, guard: OwnershipGuard, images: ImageStorage
    ) -> None:
        self._posts = posts
        self._guard = guard
        self._images = images

    def execute(self, post_id: str, acting_user_id: str) -> None:
        post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError()
        self._guard.assert_owner(post, acting_user_id, action="delete")

        if not self._posts.delete(post_id):
            raise PostNotFoundError()

        try:
            self._images.delete(post.image)
        except OSError:
            logger.warning(f"posts.delete: could not remove image for post_id={post_id}")
