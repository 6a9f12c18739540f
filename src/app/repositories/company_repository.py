"""Company Repository Interface

Defines the contract for company persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.company import Company


class CompanyRepository(ABC):
    """
    Repository interface for Company persistence

    org_num uniqueness is enforced by the storage; exists_by_org_num is
    only a fast pre-check.
    """

    @abstractmethod
    async def get_by_id(self, company_id: str) -> Optional[Company]:
        """
        Retrieve company by ID

        Args:
            company_id: Company ID

        Returns:
            Company if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_org_num(self, org_num: str) -> bool:
        """
        Check whether a company with this organization number exists

        Args:
            org_num: Organization number (NNNNNN-NNNN)

        Returns:
            True if a company exists, False otherwise
        """
        pass

    @abstractmethod
    async def create(self, company: Company) -> Company:
        """
        Create a new company

        Raises:
            BusinessRuleError: ORG_NUM_EXISTS if the unique constraint fires
        """
        pass

    @abstractmethod
    async def update(self, company: Company) -> Company:
        pass

    @abstractmethod
    async def delete(self, company: Company) -> None:
        pass
