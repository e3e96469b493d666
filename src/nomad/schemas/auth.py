"""Mock authentication and profile schemas."""

from typing import Annotated

from pydantic import BaseModel, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from nomad.schemas.fields import Email, min_length, required

Password = Annotated[str, min_length(6, "Password must be at least 6 characters")]


class LoginRequest(BaseModel):
    email: Email
    password: Password


class SignupRequest(BaseModel):
    first_name: Annotated[str, required("First name is required")]
    last_name: Annotated[str, required("Last name is required")]
    email: Email
    password: Password
    confirm_password: str

    @field_validator("confirm_password")
    @classmethod
    def check_passwords_match(cls, value: str, info: ValidationInfo) -> str:
        if value != info.data.get("password"):
            raise PydanticCustomError("password_mismatch", "Passwords don't match")
        return value


class SessionResponse(BaseModel):
    """The client-side session: token plus the auth flag and user name."""

    model_config = {"from_attributes": True}

    token: str
    is_authenticated: bool
    user_name: str


class MessageResponse(BaseModel):
    message: str


class UserResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    first_name: str
    last_name: str
    email: str
    avatar_url: str | None


class PastBookingResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    hotel_name: str
    dates: str
    status: str


class ProfileResponse(BaseModel):
    model_config = {"from_attributes": True}

    user: UserResponse
    bookings: list[PastBookingResponse]
