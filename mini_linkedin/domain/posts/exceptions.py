# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from mini_linkedin.shared.errors.base import ForbiddenError, NotFoundError


class PostNotFoundError(NotFoundError):
    default_message = "Post not found."
    default_code = "post_not_found"


class NotPostOwnerError(ForbiddenError):
    default_code = "not_post_owner"
