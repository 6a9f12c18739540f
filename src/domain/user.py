"""User Domain Entity

A registered person who can own and join companies and log in.
"""

from datetime import datetime
from sqlmodel import Field, Column
from sqlalchemy import String, UniqueConstraint
from src.domain.base import BaseModel, generate_uuid, utcnow


class User(BaseModel, table=True):
    """
    User - Registered account

    Domain Rules:
    - email is unique across all users
    - password_hash is a one-way digest, never the plaintext password
    - id is immutable once assigned
    """

    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        max_length=36,
        description="Unique user identifier (UUID)"
    )

    first_name: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="First name (2-20 chars)"
    )

    last_name: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="Last name (2-20 chars)"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Login email (unique)"
    )

    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="One-way password digest"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        description="Registration timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        description="Last update timestamp"
    )
