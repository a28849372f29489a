# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from typing import Protocol

from mini_linkedin.domain.posts.exceptions import NotPostOwnerError


class OwnedResource(Protocol):
    @property
    def owner_id(self) -> str: ...


class OwnershipGuard:
    """Restricts mutation of a resource to the user that created it."""

    def __init__(
        self,
        *,
        forbidden_status: HTTPStatus = HTTPStatus.UNAUTHORIZED,
        resource_name: str = "posts",
    ) -> None:
        self._status = forbidden_status
        self._resource_name = resource_name

    def is_owner(self, resource: OwnedResource, acting_user_id: object) -> bool:
        # Ids are compared in their string form.
        return str(resource.owner_id) == str(acting_user_id)

    def assert_owner(
        self, resource: OwnedResource, acting_user_id: object, *, action: str
    ) -> None:
        if not self.is_owner(resource, acting_user_id):
            raise NotPostOwnerError(
                f"You can only {action} your own {self._resource_name}.",
                status=self._status,
            )
