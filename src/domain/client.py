"""Client Domain Entity

A customer of a company, billed through invoices.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, String
from src.domain.base import BaseModel, generate_uuid, utcnow
from src.domain import validation


class Client(BaseModel, table=True):
    """
    Client - Customer registered under one company

    Domain Rules:
    - Must reference an existing company
    - first_name/last_name: 2-20 chars, letters, space, hyphen, apostrophe
    - address/city/country: at most 70 chars
    - phone_number is optional but must look like a phone number
    """

    __tablename__ = "clients"
    __table_args__ = (
        Index("ix_clients_company_id", "company_id"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        max_length=36,
        description="Unique client identifier (UUID)"
    )

    company_id: str = Field(
        sa_column=Column(String(36), ForeignKey("companies.id", ondelete="CASCADE"), nullable=False),
        description="Owning company"
    )

    first_name: str = Field(sa_column=Column(String(20), nullable=False))

    last_name: str = Field(sa_column=Column(String(20), nullable=False))

    email: str = Field(sa_column=Column(String(255), nullable=False))

    address: Optional[str] = Field(default=None, sa_column=Column(String(70), nullable=True))

    city: Optional[str] = Field(default=None, sa_column=Column(String(70), nullable=True))

    country: Optional[str] = Field(default=None, sa_column=Column(String(70), nullable=True))

    phone_number: Optional[str] = Field(default=None, sa_column=Column(String(20), nullable=True))

    created_at: datetime = Field(default_factory=utcnow)

    updated_at: datetime = Field(default_factory=utcnow)

    def apply_patch(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
        city: Optional[str] = None,
        country: Optional[str] = None,
        phone_number: Optional[str] = None,
    ) -> None:
        """
        Apply a partial update

        None means "no change", not "clear value". All present values are
        validated before the first one is written.
        """
        if first_name is not None:
            validation.validate_person_name("first_name", first_name)
        if last_name is not None:
            validation.validate_person_name("last_name", last_name)
        if email is not None:
            validation.validate_email(email)
        for field, value in (("address", address), ("city", city), ("country", country)):
            if value is not None:
                validation.validate_address(field, value)
        if phone_number is not None:
            validation.validate_phone_number(phone_number)

        changes = {
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "address": address,
            "city": city,
            "country": country,
            "phone_number": phone_number,
        }
        for field, value in changes.items():
            if value is not None:
                setattr(self, field, value)
        self.touch()
