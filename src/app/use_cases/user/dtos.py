"""Data Transfer Objects for User Use Cases"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from src.domain.user import User


class RegisterUserCommandDTO(BaseModel):
    """
    Command DTO for registering a user

    Fields are optional at the type level so that missing values reach the
    domain rules and fail with their own codes.
    """

    first_name: Optional[str] = Field(default=None, description="First name (2-20 chars)")
    last_name: Optional[str] = Field(default=None, description="Last name (2-20 chars)")
    email: Optional[str] = Field(default=None, description="Login email (unique)")
    password: Optional[str] = Field(default=None, description="Plaintext password (>= 8 chars)")

    class Config:
        json_schema_extra = {
            "example": {
                "first_name": "John",
                "last_name": "Doe",
                "email": "john@example.com",
                "password": "password1",
            }
        }


class UserResponseDTO(BaseModel):
    """Public projection of a user (never includes the password digest)"""

    user_id: str = Field(..., description="User ID")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    email: str = Field(..., description="Login email")
    created_at: datetime = Field(..., description="Registration timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_entity(cls, user: User) -> "UserResponseDTO":
        return cls(
            user_id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
