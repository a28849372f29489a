# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from mini_linkedin.application.interfaces import UploadedImage
from mini_linkedin.application.use_cases.posts.add_comment import AddCommentUseCase
from mini_linkedin.application.use_cases.posts.create_post import CreatePostUseCase
from mini_linkedin.application.use_cases.posts.delete_post import DeletePostUseCase
from mini_linkedin.application.use_cases.posts.get_post import GetPostUseCase
from mini_linkedin.application.use_cases.posts.list_posts import ListPostsUseCase
from mini_linkedin.application.use_cases.posts.toggle_like import ToggleLikeUseCase
from mini_linkedin.application.use_cases.posts.update_post import UpdatePostUseCase
from mini_linkedin.domain.posts.exceptions import NotPostOwnerError
from mini_linkedin.infrastructure.audit import AuditAction, audit_log
from mini_linkedin.interfaces.http.auth import auth_required, current_user
from mini_linkedin.interfaces.http.dto.posts import (CommentRequestDTO,
                                                     CreatePostFormDTO, PostDTO,
                                                     UpdatePostDTO)
from mini_linkedin.shared.errors.validation import raise_validation_error
from mini_linkedin.shared.logging import logger


def _uploaded_image() -> UploadedImage | None:
    file = request.files.get("image")
    if file is None or not file.filename:
        return None
    return UploadedImage(filename=file.filename, content_type=file.mimetype, data=file.read())


class PostsController:
    def __init__(
        self,
        *,
        list_posts_use_case: ListPostsUseCase,
        get_post_use_case: GetPostUseCase,
        create_post_use_case: CreatePostUseCase,
        update_post_use_case: UpdatePostUseCase,
        delete_post_use_case: DeletePostUseCase,
        toggle_like_use_case: ToggleLikeUseCase,
        add_comment_use_case: AddCommentUseCase,
    ) -> None:
        self._list_posts = list_posts_use_case
        self._get_post = get_post_use_case
        self._create_post = create_post_use_case
        self._update_post = update_post_use_case
        self._delete_post = delete_post_use_case
        self._toggle_like = toggle_like_use_case
        self._add_comment = add_comment_use_case

    def list_posts(self) -> tuple[Response, int]:
        posts = self._list_posts.execute()
        return jsonify([PostDTO.from_post(post).to_json() for post in posts]), 200

    def get_post(self, post_id: str) -> tuple[Response, int]:
        post = self._get_post.execute(post_id)
        return jsonify(PostDTO.from_post(post).to_json()), 200

    @auth_required
    def create_post(self) -> tuple[Response, int]:
        try:
            dto = CreatePostFormDTO.model_validate(request.form.to_dict())
        except ValidationError as exc:
            raise_validation_error(exc)

        user = current_user()
        post = self._create_post.execute(
            user.id, title=dto.title, content=dto.content, image=_uploaded_image()
        )
        audit_log(AuditAction.POST_CREATED, user_id=user.id, details={"post_id": post.id})
        logger.info(f"posts.create: ok post_id={post.id} author={user.id}")
        return jsonify(
            {
                "success": True,
                "message": "Post created successfully!",
                "post": PostDTO.from_post(post).to_json(),
            }
        ), 201

    @auth_required
    def update_post(self, post_id: str) -> tuple[Response, int]:
        try:
            dto = UpdatePostDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = current_user()
        try:
            post = self._update_post.execute(
                post_id, user.id, title=dto.title, content=dto.content
            )
        except NotPostOwnerError:
            audit_log(
                AuditAction.OWNERSHIP_DENIED,
                user_id=user.id,
                details={"post_id": post_id, "action": "edit"},
                success=False,
            )
            raise

        audit_log(AuditAction.POST_UPDATED, user_id=user.id, details={"post_id": post_id})
        logger.info(f"posts.update: ok post_id={post_id}")
        return jsonify(
            {
                "success": True,
                "message": "Post updated successfully!",
                "post": PostDTO.from_post(post).to_json(),
            }
        ), 200

    @auth_required
    def delete_post(self, post_id: str) -> tuple[Response, int]:
        user = current_user()
        try:
            self._delete_post.execute(post_id, user.id)
        except NotPostOwnerError:
            audit_log(
                AuditAction.OWNERSHIP_DENIED,
                user_id=user.id,
                details={"post_id": post_id, "action": "delete"},
                success=False,
            )
            raise

        audit_log(AuditAction.POST_DELETED, user_id=user.id, details={"post_id": post_id})
        logger.info(f"posts.delete: ok post_id={post_id}")
        return jsonify({"success": True, "message": "Post deleted successfully!"}), 200

    @auth_required
    def toggle_like(self, post_id: str) -> tuple[Response, int]:
        user = current_user()
        post, liked = self._toggle_like.execute(post_id, user.id)

        action = AuditAction.POST_LIKED if liked else AuditAction.POST_UNLIKED
        audit_log(action, user_id=user.id, details={"post_id": post_id})
        logger.info(f"posts.like: ok post_id={post_id} liked={liked} count={post.like_count}")
        return jsonify(
            {
                "success": True,
                "message": "Post liked!" if liked else "Post unliked!",
                "post": PostDTO.from_post(post).to_json(),
            }
        ), 200

    @auth_required
    def add_comment(self, post_id: str) -> tuple[Response, int]:
        try:
            dto = CommentRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = current_user()
        post = self._add_comment.execute(post_id, user.id, dto.text)
        audit_log(AuditAction.POST_COMMENTED, user_id=user.id, details={"post_id": post_id})
        logger.info(f"posts.comment: ok post_id={post_id}")
        return jsonify(
            {
                "success": True,
                "message": "Comment added successfully!",
                "post": PostDTO.from_post(post).to_json(),
            }
        ), 201

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("posts", __name__, url_prefix="/api/posts")
        bp.add_url_rule("", view_func=self.list_posts, methods=["GET"])
        bp.add_url_rule("", view_func=self.create_post, methods=["POST"])
        bp.add_url_rule("/<post_id>", view_func=self.get_post, methods=["GET"])
        bp.add_url_rule("/<post_id>", view_func=self.update_post, methods=["PUT"])
        bp.add_url_rule("/<post_id>", view_func=self.delete_post, methods=["DELETE"])
        bp.add_url_rule("/<post_id>/like", view_func=self.toggle_like, methods=["PUT"])
        bp.add_url_rule("/<post_id>/comments", view_func=self.add_comment, methods=["POST"])
        return bp
