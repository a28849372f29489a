from __future__ import annotations

from collections.abc import Sequence

from mini_linkedin.domain.posts.entities import Post
from mini_linkedin.domain.posts.repositories import PostRepository


class ListPostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, author_id: str | None = None) -> Sequence[Post]:
        """Newest first; restricted to one author when ``author_id`` is given."""
        if author_id is None:
            return self._posts.list_recent()
        return self._posts.list_by_author(author_id)
