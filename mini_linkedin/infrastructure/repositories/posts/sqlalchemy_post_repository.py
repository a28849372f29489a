# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from sqlalchemy import Select, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from mini_linkedin.domain.posts.entities import Comment as DomainComment
from mini_linkedin.domain.posts.entities import Post as DomainPost
from mini_linkedin.domain.posts.entities import UserRef
from mini_linkedin.domain.posts.repositories import PostRepository
from mini_linkedin.infrastructure.db.models import Comment, Post, PostLike, User
from mini_linkedin.infrastructure.unit_of_work import unit_of_work_scope
from mini_linkedin.shared.logging import logger


def _ref(row: User) -> UserRef:
    return UserRef(id=row.id, name=row.name)


def _to_domain(row: Post) -> DomainPost:
    return DomainPost(
        id=row.id,
        title=row.title,
        content=row.content,
        image=row.image,
        author=_ref(row.author),
        created_at=row.created_at,
        updated_at=row.updated_at,
        likes=tuple(_ref(like.user) for like in row.likes),
        comments=tuple(
            DomainComment(
                id=comment.id,
                user=_ref(comment.user),
                text=comment.text,
                created_at=comment.created_at,
            )
            for comment in row.comments
        ),
    )


def _post_query() -> Select[tuple[Post]]:
    return select(Post).options(
        joinedload(Post.author),
        selectinload(Post.likes).joinedload(PostLike.user),
        selectinload(Post.comments).joinedload(Comment.user),
    )


class SqlAlchemyPostRepository(PostRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_recent(self) -> Sequence[DomainPost]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(_post_query().order_by(Post.created_at.desc())).all()
            return [_to_domain(row) for row in rows]

    def list_by_author(self, author_id: str) -> Sequence[DomainPost]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(
                _post_query()
                .where(Post.author_id == str(author_id))
                .order_by(Post.created_at.desc())
            ).all()
            return [_to_domain(row) for row in rows]

    def get(self, post_id: str) -> DomainPost | None:
        with unit_of_work_scope(self._session_factory) as session:
            return self._load(session, post_id)

    def add(self, *, author_id: str, title: str, content: str, image: str) -> DomainPost:
        with unit_of_work_scope(self._session_factory) as session:
            row = Post(author_id=str(author_id), title=title, content=content, image=image)
            session.add(row)
            session.flush()
            loaded = self._load(session, row.id)
            assert loaded is not None
            return loaded

    def update(
        self, post_id: str, *, title: str | None = None, content: str | None = None
    ) -> DomainPost | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Post, str(post_id))
            if row is None:
                return None
            if title is not None:
                row.title = title
            if content is not None:
                row.content = content
            row.updated_at = datetime.now(UTC)
            session.flush()
            return self._load(session, row.id)

    def delete(self, post_id: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Post, str(post_id))
            if row is None:
                return False
            # ORM delete so likes and comments cascade on every backend.
            session.delete(row)
            return True

    def toggle_like(self, post_id: str, user_id: str) -> bool | None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                if session.get(Post, str(post_id)) is None:
                    return None
                removed = session.execute(
                    delete(PostLike).where(
                        PostLike.post_id == str(post_id),
                        PostLike.user_id == str(user_id),
                    )
                ).rowcount
                if removed:
                    return False
                session.add(PostLike(post_id=str(post_id), user_id=str(user_id)))
                session.flush()
                return True
        except IntegrityError:
            # A concurrent toggle inserted the same pair first; the user likes the post.
            logger.info(f"posts.like: concurrent like detected post_id={post_id}")
            return True

    def add_comment(self, post_id: str, *, user_id: str, text: str) -> DomainPost | None:
        with unit_of_work_scope(self._session_factory) as session:
            if session.get(Post, str(post_id)) is None:
                return None
            session.add(Comment(post_id=str(post_id), user_id=str(user_id), text=text))
            session.flush()
            return self._load(session, post_id)

    @staticmethod
    def _load(session: Session, post_id: str) -> DomainPost | None:
        row = session.scalars(
            _post_query()
            .where(Post.id == str(post_id))
            .execution_options(populate_existing=True)
        ).first()
        return _to_domain(row) if row else None
