"""Company Membership Service

Adds users to companies by email, removes them, and lists memberships.
"""

import logging
from typing import List, Optional
from src.libs.result import Result
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.transaction import TransactionScope
from src.app.repositories.company_repository import CompanyRepository
from src.app.repositories.company_user_repository import CompanyUserRepository
from src.app.repositories.user_repository import UserRepository
from src.domain import validation
from src.domain.company_user import CompanyUser
from src.domain.errors import BusinessRuleError, EntityNotFoundError
from .dtos import CompanyUserResponseDTO

logger = logging.getLogger(__name__)


class CompanyUserService:
    """
    Business Rules:
    1. Company and user must both exist to create a membership
    2. A (user, company) pair exists at most once
    3. Removing a missing membership fails with ENTITY_NOT_FOUND
    """

    def __init__(
        self,
        uow: UnitOfWork,
        user_repo: UserRepository,
        company_user_repo: CompanyUserRepository,
        company_repo: CompanyRepository,
    ):
        self.uow = uow
        self.user_repo = user_repo
        self.company_user_repo = company_user_repo
        self.company_repo = company_repo
        self.transaction = TransactionScope(uow)

    async def add_user_by_email(
        self, company_id: Optional[str], email: Optional[str]
    ) -> Result[CompanyUserResponseDTO]:
        return await self.transaction.run("add_company_user", self._add_user_by_email, company_id, email)

    async def remove_user(self, company_id: Optional[str], user_id: Optional[str]) -> Result[None]:
        return await self.transaction.run("remove_company_user", self._remove_user, company_id, user_id)

    async def list_users_of_company(self, company_id: Optional[str]) -> Result[List[CompanyUserResponseDTO]]:
        return await self.transaction.run(
            "list_company_users", self._list_users_of_company, company_id, read_only=True
        )

    async def list_companies_of_user(self, user_id: Optional[str]) -> Result[List[CompanyUserResponseDTO]]:
        return await self.transaction.run(
            "list_user_companies", self._list_companies_of_user, user_id, read_only=True
        )

    async def _add_user_by_email(self, company_id: Optional[str], email: Optional[str]) -> CompanyUserResponseDTO:
        logger.debug(
            f"Add user to company requested: companyId={company_id}, email={validation.mask_email(email)}"
        )

        validation.require("company_id", company_id)
        validation.validate_email(email)

        company = await self.company_repo.get_by_id(company_id)
        if not company:
            raise EntityNotFoundError("Company", company_id)

        user = await self.user_repo.get_by_email(email)
        if not user:
            raise EntityNotFoundError("User", validation.mask_email(email))

        if await self.company_user_repo.get(user.id, company.id):
            raise BusinessRuleError(
                "User is already associated with this company", "USER_ALREADY_ASSOCIATED"
            )

        association = await self.company_user_repo.create(
            CompanyUser(user_id=user.id, company_id=company.id)
        )

        logger.info(f"User {user.id} added to company {company.id} successfully")
        return CompanyUserResponseDTO.from_entity(association)

    async def _remove_user(self, company_id: Optional[str], user_id: Optional[str]) -> None:
        logger.debug(f"Remove user from company requested: companyId={company_id}, userId={user_id}")

        validation.require("company_id", company_id)
        validation.require("user_id", user_id)

        association = await self.company_user_repo.get(user_id, company_id)
        if not association:
            raise EntityNotFoundError(
                "CompanyUser",
                f"userId={user_id}, companyId={company_id}",
                code="COMPANY_USER_NOT_FOUND",
            )

        await self.company_user_repo.delete(association)
        logger.info(f"User {user_id} removed from company {company_id} successfully")

    async def _list_users_of_company(self, company_id: Optional[str]) -> List[CompanyUserResponseDTO]:
        validation.require("company_id", company_id)
        associations = await self.company_user_repo.list_by_company_id(company_id)
        return [CompanyUserResponseDTO.from_entity(a) for a in associations]

    async def _list_companies_of_user(self, user_id: Optional[str]) -> List[CompanyUserResponseDTO]:
        validation.require("user_id", user_id)
        associations = await self.company_user_repo.list_by_user_id(user_id)
        return [CompanyUserResponseDTO.from_entity(a) for a in associations]
