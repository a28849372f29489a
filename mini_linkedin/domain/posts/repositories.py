# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Post


class PostRepository(Protocol):
    def list_recent(self) -> Sequence[Post]: ...
    def list_by_author(self, author_id: str) -> Sequence[Post]: ...
    def get(self, post_id: str) -> Post | None: ...
    def add(self, *, author_id: str, title: str, content: str, image: str) -> Post: ...
    def update(
        self, post_id: str, *, title: str | None = None, content: str | None = None
    ) -> Post | None: ...
    def delete(self, post_id: str) -> bool: ...

    def toggle_like(self, post_id: str, user_id: str) -> bool | None:
        """Flip ``user_id``'s membership in the likes of the post atomically.

        Returns True when the user now likes the post, None when the post is gone.
        """
        ...

    def add_comment(self, post_id: str, *, user_id: str, text: str) -> Post | None: ...
