# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mini_linkedin.domain.users.entities import User as DomainUser
from mini_linkedin.domain.users.exceptions import EmailAlreadyRegisteredError
from mini_linkedin.domain.users.repositories import UserRepository
from mini_linkedin.infrastructure.db.models import User
from mini_linkedin.infrastructure.unit_of_work import unit_of_work_scope
from mini_linkedin.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
        bio=row.bio or "",
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(User).where(User.email == email)).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, str(user_id))
            return _to_domain(row) if row else None

    def add(self, *, name: str, email: str, password_hash: str) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(name=name, email=email, password_hash=password_hash, bio="")
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            # Lost a race against a concurrent registration with the same email.
            logger.info("users.add: unique email constraint hit")
            raise EmailAlreadyRegisteredError() from exc

    def update_profile(
        self, user_id: str, *, name: str | None = None, bio: str | None = None
    ) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, str(user_id))
            if row is None:
                return None
            if name is not None:
                row.name = name
            if bio is not None:
                row.bio = bio
            row.updated_at = datetime.now(UTC)
            session.flush()
            return _to_domain(row)
