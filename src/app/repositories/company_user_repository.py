"""CompanyUser Repository Interface

Defines the contract for company membership persistence.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.company_user import CompanyUser


class CompanyUserRepository(ABC):
    """Repository interface for CompanyUser associations (composite key)"""

    @abstractmethod
    async def get(self, user_id: str, company_id: str) -> Optional[CompanyUser]:
        """
        Retrieve association by composite key

        Args:
            user_id: User ID
            company_id: Company ID

        Returns:
            CompanyUser if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, association: CompanyUser) -> CompanyUser:
        """
        Create a new association

        Raises:
            BusinessRuleError: USER_ALREADY_ASSOCIATED if the pair already exists
        """
        pass

    @abstractmethod
    async def delete(self, association: CompanyUser) -> None:
        pass

    @abstractmethod
    async def list_by_company_id(self, company_id: str) -> List[CompanyUser]:
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: str) -> List[CompanyUser]:
        pass
