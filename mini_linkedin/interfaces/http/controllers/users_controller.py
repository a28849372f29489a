# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from mini_linkedin.application.use_cases.posts.list_posts import ListPostsUseCase
from mini_linkedin.application.use_cases.users.get_profile import GetProfileUseCase
from mini_linkedin.application.use_cases.users.update_profile import \
    UpdateProfileUseCase
from mini_linkedin.infrastructure.audit import AuditAction, audit_log
from mini_linkedin.interfaces.http.auth import auth_required, current_user
from mini_linkedin.interfaces.http.dto.posts import PostDTO
from mini_linkedin.interfaces.http.dto.users import UpdateProfileDTO, UserDTO
from mini_linkedin.shared.errors.validation import raise_validation_error
from mini_linkedin.shared.logging import logger


class UsersController:
    def __init__(
        self,
        *,
        get_profile_use_case: GetProfileUseCase,
        update_profile_use_case: UpdateProfileUseCase,
        list_posts_use_case: ListPostsUseCase,
    ) -> None:
        self._get_profile = get_profile_use_case
        self._update_profile = update_profile_use_case
        self._list_posts = list_posts_use_case

    def get_user(self, user_id: str) -> tuple[Response, int]:
        user = self._get_profile.execute(user_id)
        return jsonify({"success": True, "user": UserDTO.from_profile(user).to_json()}), 200

    def user_posts(self, user_id: str) -> tuple[Response, int]:
        # Unknown users simply have no posts.
        posts = self._list_posts.execute(author_id=user_id)
        return jsonify([PostDTO.from_post(post).to_json() for post in posts]), 200

    @auth_required
    def update_profile(self) -> tuple[Response, int]:
        try:
            dto = UpdateProfileDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user_id = current_user().id
        user = self._update_profile.execute(user_id, name=dto.name, bio=dto.bio)

        audit_log(
            AuditAction.PROFILE_UPDATED,
            user_id=user_id,
            details={"fields": sorted(dto.model_dump(exclude_none=True))},
        )
        logger.info(f"users.profile: ok user_id={user_id}")
        return jsonify(
            {
                "success": True,
                "message": "Profile updated successfully!",
                "user": UserDTO.from_profile(user).to_json(),
            }
        ), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/api/users")
        bp.add_url_rule("/profile", view_func=self.update_profile, methods=["PUT"])
        bp.add_url_rule("/<user_id>", view_func=self.get_user, methods=["GET"])
        bp.add_url_rule("/<user_id>/posts", view_func=self.user_posts, methods=["GET"])
        return bp
