"""Application dependency container."""

from __future__ import annotations

from functools import cached_property
from http import HTTPStatus

from mini_linkedin.application.services.auth_gate import AuthGate
from mini_linkedin.application.services.credentials import CredentialStore
from mini_linkedin.application.services.password_hashing import WerkzeugPasswordHasher
from mini_linkedin.application.services.tokens import JwtTokenService
from mini_linkedin.application.use_cases.posts.add_comment import AddCommentUseCase
from mini_linkedin.application.use_cases.posts.create_post import CreatePostUseCase
from mini_linkedin.application.use_cases.posts.delete_post import DeletePostUseCase
from mini_linkedin.application.use_cases.posts.get_post import GetPostUseCase
from mini_linkedin.application.use_cases.posts.list_posts import ListPostsUseCase
from mini_linkedin.application.use_cases.posts.toggle_like import ToggleLikeUseCase
from mini_linkedin.application.use_cases.posts.update_post import UpdatePostUseCase
from mini_linkedin.application.use_cases.users.get_profile import GetProfileUseCase
from mini_linkedin.application.use_cases.users.login_user import LoginUserUseCase
from mini_linkedin.application.use_cases.users.register_user import RegisterUserUseCase
from mini_linkedin.application.use_cases.users.update_profile import UpdateProfileUseCase
from mini_linkedin.domain.ownership import OwnershipGuard
from mini_linkedin.infrastructure.db import Database
from mini_linkedin.infrastructure.repositories.posts.sqlalchemy_post_repository import (
    SqlAlchemyPostRepository,
)
from mini_linkedin.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from mini_linkedin.infrastructure.storage import LocalImageStorage
from mini_linkedin.interfaces.http.controllers.auth_controller import AuthController
from mini_linkedin.interfaces.http.controllers.misc_controller import MiscController
from mini_linkedin.interfaces.http.controllers.posts_controller import PostsController
from mini_linkedin.interfaces.http.controllers.users_controller import UsersController
from mini_linkedin.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.auth.password_hash_method)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService.from_config(self.config.auth)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database.session_factory)

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository(self.database.session_factory)

    @cached_property
    def image_storage(self) -> LocalImageStorage:
        uploads = self.config.uploads
        return LocalImageStorage(
            uploads.directory,
            allowed_extensions=uploads.allowed_extensions,
            max_bytes=uploads.max_bytes,
        )

    @cached_property
    def credential_store(self) -> CredentialStore:
        return CredentialStore(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            password_min_length=self.config.auth.password_min_length,
        )

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(tokens=self.token_service, users=self.user_repository)

    @cached_property
    def ownership_guard(self) -> OwnershipGuard:
        return OwnershipGuard(
            forbidden_status=HTTPStatus(self.config.security.forbidden_status)
        )

    # Users

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(credentials=self.credential_store, tokens=self.token_service)

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(credentials=self.credential_store, tokens=self.token_service)

    @cached_property
    def get_profile_use_case(self) -> GetProfileUseCase:
        return GetProfileUseCase(users=self.user_repository)

    @cached_property
    def update_profile_use_case(self) -> UpdateProfileUseCase:
        return UpdateProfileUseCase(users=self.user_repository)

    # Posts

    @cached_property
    def list_posts_use_case(self) -> ListPostsUseCase:
        return ListPostsUseCase(posts=self.post_repository)

    @cached_property
    def get_post_use_case(self) -> GetPostUseCase:
        return GetPostUseCase(posts=self.post_repository)

    @cached_property
    def create_post_use_case(self) -> CreatePostUseCase:
        return CreatePostUseCase(posts=self.post_repository, images=self.image_storage)

    @cached_property
    def update_post_use_case(self) -> UpdatePostUseCase:
        return UpdatePostUseCase(posts=self.post_repository, guard=self.ownership_guard)

    @cached_property
    def delete_post_use_case(self) -> DeletePostUseCase:
        return DeletePostUseCase(
            posts=self.post_repository, guard=self.ownership_guard, images=self.image_storage
        )

    @cached_property
    def toggle_like_use_case(self) -> ToggleLikeUseCase:
        return ToggleLikeUseCase(posts=self.post_repository)

    @cached_property
    def add_comment_use_case(self) -> AddCommentUseCase:
        return AddCommentUseCase(posts=self.post_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            get_profile_use_case=self.get_profile_use_case,
        )

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            list_posts_use_case=self.list_posts_use_case,
            get_post_use_case=self.get_post_use_case,
            create_post_use_case=self.create_post_use_case,
            update_post_use_case=self.update_post_use_case,
            delete_post_use_case=self.delete_post_use_case,
            toggle_like_use_case=self.toggle_like_use_case,
            add_comment_use_case=self.add_comment_use_case,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            get_profile_use_case=self.get_profile_use_case,
            update_profile_use_case=self.update_profile_use_case,
            list_posts_use_case=self.list_posts_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database, storage=self.image_storage)

    def close(self) -> None:
        if "database" in self.__dict__:
            self.database.dispose()
