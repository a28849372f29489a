from __future__ import annotations

from mini_linkedin.domain.posts.entities import Post
from mini_linkedin.domain.posts.exceptions import PostNotFoundError
from mini_linkedin.domain.posts.repositories import PostRepository


class GetPostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: str) -> Post:
        post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError()
        return post
