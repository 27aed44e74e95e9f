from datetime import datetime
from enum import StrEnum

from pydantic import Field, SecretStr

from ._base import ApiModel


class UserRole(StrEnum):
    ADMIN = "ADMIN"
    ORGANIZER = "ORGANIZER"
    ATHLETE = "ATHLETE"
    VIEWER = "VIEWER"


class UserActivity(ApiModel):
    competitions: int = Field(default=0, ge=0)
    reviews: int = Field(default=0, ge=0)


class User(ApiModel):
    id: str = Field(description="User id.")
    email: str = Field(description="Login email.")
    username: str | None = Field(default=None, description="Public username.")
    first_name: str | None = Field(default=None)
    last_name: str | None = Field(default=None)
    full_name: str | None = Field(default=None)
    role: UserRole = Field(default=UserRole.ATHLETE, description="Access role.")
    is_active: bool = Field(default=True)
    created_at: datetime | None = Field(default=None)
    updated_at: datetime | None = Field(default=None)
    stats: UserActivity | None = Field(default=None)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class LoginCredentials(ApiModel):
    email: str = Field(min_length=3)
    password: SecretStr = Field(min_length=1)

    def to_payload(self) -> dict:
        return {"email": self.email, "password": self.password.get_secret_value()}


class RegisterData(LoginCredentials):
    username: str = Field(min_length=3)
    first_name: str | None = Field(default=None)
    last_name: str | None = Field(default=None)
    role: UserRole | None = Field(default=None)

    def to_payload(self) -> dict:
        payload = self.model_dump(
            mode="json", by_alias=True, exclude_unset=True, exclude={"password"}
        )
        payload["password"] = self.password.get_secret_value()
        return payload


class AuthResponse(ApiModel):
    token: SecretStr = Field(description="Bearer token for subsequent requests.")
    user: User
