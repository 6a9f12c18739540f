"""Company Service

Creates, patches and deletes companies. A company is always created
together with the membership of its creator, in one unit of work.
"""

import logging
from typing import Optional
from src.libs.result import Result
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.transaction import TransactionScope
from src.app.repositories.company_repository import CompanyRepository
from src.app.repositories.company_user_repository import CompanyUserRepository
from src.app.repositories.user_repository import UserRepository
from src.domain import validation
from src.domain.company import Company
from src.domain.company_user import CompanyUser
from src.domain.errors import BusinessRuleError, EntityNotFoundError
from .dtos import CreateCompanyCommandDTO, UpdateCompanyCommandDTO, CompanyResponseDTO

logger = logging.getLogger(__name__)


class CompanyService:
    """
    Business Rules:
    1. org_num is present, well formed and unique
    2. name is 2-20 chars
    3. The creator must be an existing user and becomes a member
    4. Company and creator membership are persisted atomically
    """

    def __init__(
        self,
        uow: UnitOfWork,
        company_repo: CompanyRepository,
        company_user_repo: CompanyUserRepository,
        user_repo: UserRepository,
    ):
        self.uow = uow
        self.company_repo = company_repo
        self.company_user_repo = company_user_repo
        self.user_repo = user_repo
        self.transaction = TransactionScope(uow)

    async def create(
        self, creator_user_id: Optional[str], command: CreateCompanyCommandDTO
    ) -> Result[CompanyResponseDTO]:
        """
        Create a company on behalf of an existing user

        Flow:
        1. Validate creator id, org_num, name and optional contact fields
        2. Resolve the creator
        3. Reject duplicate org_num
        4. Persist company and creator membership
        5. Commit (both writes or neither)
        """
        return await self.transaction.run("create_company", self._create, creator_user_id, command)

    async def update(
        self, company_id: Optional[str], command: UpdateCompanyCommandDTO
    ) -> Result[CompanyResponseDTO]:
        """Apply the non-null fields of the patch to an existing company"""
        return await self.transaction.run("update_company", self._update, company_id, command)

    async def delete(self, company_id: Optional[str]) -> Result[None]:
        return await self.transaction.run("delete_company", self._delete, company_id)

    async def get_entity(self, company_id: Optional[str]) -> Result[Company]:
        """Resolve the company entity or fail with COMPANY_NOT_FOUND"""
        return await self.transaction.run("get_company", self._get_entity, company_id, read_only=True)

    async def get_by_id(self, company_id: Optional[str]) -> Result[CompanyResponseDTO]:
        return await self.transaction.run("get_company", self._get_by_id, company_id, read_only=True)

    async def _create(self, creator_user_id: Optional[str], command: CreateCompanyCommandDTO) -> CompanyResponseDTO:
        logger.debug(f"Company creation started: creatorUserId={creator_user_id}")

        # Step 1: Presence and format
        validation.require("creator_user_id", creator_user_id)
        validation.validate_org_num(command.org_num)
        validation.validate_company_name(command.name)
        validation.validate_optional_email(command.email)
        validation.validate_phone_number(command.phone_number)
        validation.validate_address("address", command.address)
        validation.validate_address("city", command.city)
        validation.validate_address("country", command.country)

        # Step 2: Existence
        creator = await self.user_repo.get_by_id(creator_user_id)
        if not creator:
            raise EntityNotFoundError("User", creator_user_id)

        # Step 3: Uniqueness
        if await self.company_repo.exists_by_org_num(command.org_num):
            raise BusinessRuleError(
                "Company with organization number already exists", "ORG_NUM_EXISTS"
            )

        # Step 4: Company + creator membership
        company = Company(
            org_num=command.org_num,
            name=command.name,
            email=command.email,
            phone_number=command.phone_number,
            address=command.address,
            city=command.city,
            country=command.country,
        )
        created_company = await self.company_repo.create(company)

        await self.company_user_repo.create(
            CompanyUser(user_id=creator.id, company_id=created_company.id)
        )

        logger.info(
            f"Company created successfully with id={created_company.id} by userId={creator_user_id}"
        )
        return CompanyResponseDTO.from_entity(created_company)

    async def _update(self, company_id: Optional[str], command: UpdateCompanyCommandDTO) -> CompanyResponseDTO:
        logger.debug(f"Company update requested for companyId={company_id}")
        validation.require("company_id", company_id)

        company = await self._resolve(company_id)
        company.apply_patch(
            name=command.name,
            email=command.email,
            phone_number=command.phone_number,
            address=command.address,
            city=command.city,
            country=command.country,
        )
        updated_company = await self.company_repo.update(company)

        logger.info(f"Company updated successfully with id={updated_company.id}")
        return CompanyResponseDTO.from_entity(updated_company)

    async def _delete(self, company_id: Optional[str]) -> None:
        logger.debug(f"Company deletion requested for companyId={company_id}")
        validation.require("company_id", company_id)

        company = await self._resolve(company_id)
        await self.company_repo.delete(company)

        logger.info(f"Company deleted successfully with id={company_id}")

    async def _get_entity(self, company_id: Optional[str]) -> Company:
        validation.require("company_id", company_id)
        return await self._resolve(company_id)

    async def _get_by_id(self, company_id: Optional[str]) -> CompanyResponseDTO:
        company = await self._get_entity(company_id)
        return CompanyResponseDTO.from_entity(company)

    async def _resolve(self, company_id: str) -> Company:
        company = await self.company_repo.get_by_id(company_id)
        if not company:
            raise EntityNotFoundError("Company", company_id)
        return company
