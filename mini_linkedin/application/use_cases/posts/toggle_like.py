# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from mini_linkedin.domain.posts.entities import Post
from mini_linkedin.domain.posts.exceptions import PostNotFoundError
from mini_linkedin.domain.posts.repositories import PostRepository


class ToggleLikeUseCase:
    """Like or unlike a post. Open to every authenticated user, author included."""

    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: str, acting_user_id: str) -> tuple[Post, bool]:
        liked = self._posts.toggle_like(post_id, acting_user_id)
        if liked is None:
            raise PostNotFoundError()

        post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError()
        return post, liked
