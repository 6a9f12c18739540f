"""CompanyUser Association Entity

Many-to-many link between users and companies.
"""

from datetime import datetime
from sqlmodel import Field, Column
from sqlalchemy import ForeignKey, String
from src.domain.base import BaseModel, utcnow


class CompanyUser(BaseModel, table=True):
    """
    CompanyUser - Membership of a user in a company

    Domain Rules:
    - Identity is the (user_id, company_id) pair; duplicates are impossible
    - Both user and company must exist when the association is created
    - Removed independently of the user and the company
    """

    __tablename__ = "company_users"

    user_id: str = Field(
        sa_column=Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
        description="Associated user"
    )

    company_id: str = Field(
        sa_column=Column(String(36), ForeignKey("companies.id", ondelete="CASCADE"), primary_key=True),
        description="Associated company"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        description="When the user joined the company"
    )
