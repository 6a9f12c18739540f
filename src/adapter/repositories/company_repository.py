"""SQLAlchemy Company Repository Implementation"""

from datetime import datetime
from typing import Optional
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.company_repository import CompanyRepository
from src.adapter.repositories.constraints import constraint_guard
from src.domain.company import Company


class SqlAlchemyCompanyRepository(CompanyRepository):
    """
    SQLAlchemy implementation of CompanyRepository

    org_num uniqueness is backed by uq_companies_org_num.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, company_id: str) -> Optional[Company]:
        statement = select(Company).where(Company.id == company_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def exists_by_org_num(self, org_num: str) -> bool:
        statement = select(func.count()).select_from(Company).where(Company.org_num == org_num)
        result = await self.session.execute(statement)
        return result.scalar_one() > 0

    async def create(self, company: Company) -> Company:
        async with constraint_guard():
            self.session.add(company)
            await self.session.flush()
        await self.session.refresh(company)
        return company

    async def update(self, company: Company) -> Company:
        company.updated_at = datetime.utcnow()
        async with constraint_guard():
            self.session.add(company)
            await self.session.flush()
        await self.session.refresh(company)
        return company

    async def delete(self, company: Company) -> None:
        await self.session.delete(company)
        await self.session.flush()
