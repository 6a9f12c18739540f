"""Data Transfer Objects for Company Use Cases"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from src.domain.company import Company


class CreateCompanyCommandDTO(BaseModel):
    """Command DTO for creating a company"""

    org_num: Optional[str] = Field(default=None, description="Organization number (NNNNNN-NNNN)")
    name: Optional[str] = Field(default=None, description="Company name (2-20 chars)")
    email: Optional[str] = Field(default=None, description="Contact email")
    phone_number: Optional[str] = Field(default=None, description="Contact phone number")
    address: Optional[str] = Field(default=None, description="Street address (<= 70 chars)")
    city: Optional[str] = Field(default=None, description="City (<= 70 chars)")
    country: Optional[str] = Field(default=None, description="Country (<= 70 chars)")

    class Config:
        json_schema_extra = {
            "example": {
                "org_num": "123456-7890",
                "name": "Acme",
                "email": "billing@acme.com",
                "phone_number": "+46 70 123 45 67",
                "address": "Main Street 1",
                "city": "Stockholm",
                "country": "Sweden",
            }
        }


class UpdateCompanyCommandDTO(BaseModel):
    """
    Patch DTO for updating a company

    None means "leave unchanged". The organization number cannot be patched.
    """

    name: Optional[str] = Field(default=None)
    email: Optional[str] = Field(default=None)
    phone_number: Optional[str] = Field(default=None)
    address: Optional[str] = Field(default=None)
    city: Optional[str] = Field(default=None)
    country: Optional[str] = Field(default=None)


class CompanyResponseDTO(BaseModel):
    """Projection of a company"""

    company_id: str = Field(..., description="Company ID")
    org_num: str = Field(..., description="Organization number")
    name: str = Field(..., description="Company name")
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, company: Company) -> "CompanyResponseDTO":
        return cls(
            company_id=company.id,
            org_num=company.org_num,
            name=company.name,
            email=company.email,
            phone_number=company.phone_number,
            address=company.address,
            city=company.city,
            country=company.country,
            created_at=company.created_at,
            updated_at=company.updated_at,
        )
