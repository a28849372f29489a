from __future__ import annotations

from mini_linkedin.domain.posts.entities import Post, validate_comment
from mini_linkedin.domain.posts.exceptions import PostNotFoundError
from mini_linkedin.domain.posts.repositories import PostRepository


class AddCommentUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: str, acting_user_id: str, text: str) -> Post:
        validate_comment(text)
        post = self._posts.add_comment(post_id, user_id=acting_user_id, text=text.strip())
        if post is None:
            raise PostNotFoundError()
        return post
