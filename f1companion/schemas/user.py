from datetime import datetime

from pydantic import Field

from f1companion.schemas.common import ApiModel
from f1companion.schemas.team import TeamOut


class RegisterIn(ApiModel):
    display_name: str | None = Field(default=None, max_length=100)


class ProfileUpdateIn(ApiModel):
    """Only fields present in the body are changed."""

    display_name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=255)
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    avatar_url: str | None = Field(default=None, max_length=500)


class UserProfileOut(ApiModel):
    id: int
    email: str
    display_name: str | None
    first_name: str | None
    last_name: str | None
    avatar_url: str | None
    created_at: datetime
    updated_at: datetime | None
    team: TeamOut | None = None
