"""Company Domain Entity

An organization identified by its organization number.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import String, UniqueConstraint
from src.domain.base import BaseModel, generate_uuid, utcnow
from src.domain import validation


class Company(BaseModel, table=True):
    """
    Company - Organization owning clients and invoices

    Domain Rules:
    - org_num is unique and has the format NNNNNN-NNNN
    - name is 2-20 chars
    - org_num cannot be changed after creation
    - created by an existing user who is associated automatically
    """

    __tablename__ = "companies"
    __table_args__ = (
        UniqueConstraint("org_num", name="uq_companies_org_num"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        max_length=36,
        description="Unique company identifier (UUID)"
    )

    org_num: str = Field(
        sa_column=Column(String(11), nullable=False),
        description="Organization number (e.g., 123456-7890)"
    )

    name: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="Company name (2-20 chars)"
    )

    email: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Contact email"
    )

    phone_number: Optional[str] = Field(
        default=None,
        sa_column=Column(String(20), nullable=True),
        description="Contact phone number"
    )

    address: Optional[str] = Field(
        default=None,
        sa_column=Column(String(70), nullable=True),
    )

    city: Optional[str] = Field(
        default=None,
        sa_column=Column(String(70), nullable=True),
    )

    country: Optional[str] = Field(
        default=None,
        sa_column=Column(String(70), nullable=True),
    )

    created_at: datetime = Field(default_factory=utcnow)

    updated_at: datetime = Field(default_factory=utcnow)

    def apply_patch(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        phone_number: Optional[str] = None,
        address: Optional[str] = None,
        city: Optional[str] = None,
        country: Optional[str] = None,
    ) -> None:
        """
        Apply a partial update

        None means "leave unchanged". Every present value is validated
        before any field is written, so a rejected patch leaves the
        entity untouched.
        """
        if name is not None:
            validation.validate_company_name(name)
        validation.validate_optional_email(email)
        if phone_number is not None:
            validation.validate_phone_number(phone_number)
        for field, value in (("address", address), ("city", city), ("country", country)):
            if value is not None:
                validation.validate_address(field, value)

        changes = {
            "name": name,
            "email": email,
            "phone_number": phone_number,
            "address": address,
            "city": city,
            "country": country,
        }
        for field, value in changes.items():
            if value is not None:
                setattr(self, field, value)
        self.touch()
