"""Data Transfer Objects for Client Use Cases"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from src.domain.client import Client


class CreateClientCommandDTO(BaseModel):
    """Command DTO for registering a client under a company"""

    company_id: Optional[str] = Field(default=None, description="Owning company ID")
    first_name: Optional[str] = Field(default=None, description="First name (2-20 chars)")
    last_name: Optional[str] = Field(default=None, description="Last name (2-20 chars)")
    email: Optional[str] = Field(default=None, description="Contact email")
    address: Optional[str] = Field(default=None, description="Street address (<= 70 chars)")
    city: Optional[str] = Field(default=None, description="City (<= 70 chars)")
    country: Optional[str] = Field(default=None, description="Country (<= 70 chars)")
    phone_number: Optional[str] = Field(default=None, description="Optional phone number")

    class Config:
        json_schema_extra = {
            "example": {
                "company_id": "7d1c1f0e-3c1a-4a57-9f7e-2b8c1b2d9a10",
                "first_name": "Anna",
                "last_name": "O'Neil",
                "email": "anna@client.com",
                "city": "Gothenburg",
                "country": "Sweden",
                "phone_number": "+46 31 123 456",
            }
        }


class UpdateClientCommandDTO(BaseModel):
    """
    Patch DTO for updating a client

    Only client_id is required; every other None field is left unchanged.
    """

    client_id: Optional[str] = Field(default=None, description="Client to update")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    phone_number: Optional[str] = None


class ClientResponseDTO(BaseModel):
    client_id: str
    company_id: str
    first_name: str
    last_name: str
    email: str
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    phone_number: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, client: Client) -> "ClientResponseDTO":
        return cls(
            client_id=client.id,
            company_id=client.company_id,
            first_name=client.first_name,
            last_name=client.last_name,
            email=client.email,
            address=client.address,
            city=client.city,
            country=client.country,
            phone_number=client.phone_number,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )
