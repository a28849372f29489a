from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from mini_linkedin.domain.users.entities import UserProfile


def _ensure_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; they are stored as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


UtcDatetime = Annotated[datetime, AfterValidator(_ensure_utc)]


class UserDTO(BaseModel):
    id: str = Field(serialization_alias="_id")
    name: str
    email: str
    bio: str
    created_at: UtcDatetime = Field(serialization_alias="createdAt")
    updated_at: UtcDatetime = Field(serialization_alias="updatedAt")

    @classmethod
    def from_profile(cls, profile: UserProfile) -> UserDTO:
        return cls(
            id=profile.id,
            name=profile.name,
            email=profile.email,
            bio=profile.bio,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class UpdateProfileDTO(BaseModel):
    name: str | None = None
    bio: str | None = None

    model_config = ConfigDict(extra="ignore")
