from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from mini_linkedin.domain.posts.entities import Comment, Post, UserRef
from mini_linkedin.interfaces.http.dto.users import UtcDatetime


class CreatePostFormDTO(BaseModel):
    title: str
    content: str

    model_config = ConfigDict(extra="ignore")


class UpdatePostDTO(BaseModel):
    title: str | None = None
    content: str | None = None

    # Only title and content are editable; anything else in the body is dropped.
    model_config = ConfigDict(extra="ignore")


class CommentRequestDTO(BaseModel):
    text: str


class UserRefDTO(BaseModel):
    id: str = Field(serialization_alias="_id")
    name: str

    @classmethod
    def from_ref(cls, ref: UserRef) -> UserRefDTO:
        return cls(id=ref.id, name=ref.name)


class CommentDTO(BaseModel):
    id: str = Field(serialization_alias="_id")
    user: UserRefDTO
    text: str
    created_at: UtcDatetime = Field(serialization_alias="createdAt")

    @classmethod
    def from_comment(cls, comment: Comment) -> CommentDTO:
        return cls(
            id=comment.id,
            user=UserRefDTO.from_ref(comment.user),
            text=comment.text,
            created_at=comment.created_at,
        )


class PostDTO(BaseModel):
    id: str = Field(serialization_alias="_id")
    title: str
    content: str
    image: str
    author: UserRefDTO
    likes: list[UserRefDTO]
    like_count: int = Field(serialization_alias="likeCount")
    comments: list[CommentDTO]
    comment_count: int = Field(serialization_alias="commentCount")
    created_at: UtcDatetime = Field(serialization_alias="createdAt")
    updated_at: UtcDatetime = Field(serialization_alias="updatedAt")

    @classmethod
    def from_post(cls, post: Post) -> PostDTO:
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            image=post.image,
            author=UserRefDTO.from_ref(post.author),
            likes=[UserRefDTO.from_ref(like) for like in post.likes],
            like_count=post.like_count,
            comments=[CommentDTO.from_comment(comment) for comment in post.comments],
            comment_count=post.comment_count,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
