"""Data Transfer Objects for Company Membership Use Cases"""

from datetime import datetime
from pydantic import BaseModel, Field
from src.domain.company_user import CompanyUser


class CompanyUserResponseDTO(BaseModel):
    """Projection of a user's membership in a company"""

    user_id: str = Field(..., description="Member user ID")
    company_id: str = Field(..., description="Company ID")
    created_at: datetime = Field(..., description="When the membership was created")

    @classmethod
    def from_entity(cls, association: CompanyUser) -> "CompanyUserResponseDTO":
        return cls(
            user_id=association.user_id,
            company_id=association.company_id,
            created_at=association.created_at,
        )
