"""SQLAlchemy CompanyUser Repository Implementation"""

from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.company_user_repository import CompanyUserRepository
from src.adapter.repositories.constraints import constraint_guard
from src.domain.company_user import CompanyUser


class SqlAlchemyCompanyUserRepository(CompanyUserRepository):
    """
    SQLAlchemy implementation of CompanyUserRepository

    The composite primary key (user_id, company_id) rejects duplicates.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, user_id: str, company_id: str) -> Optional[CompanyUser]:
        statement = select(CompanyUser).where(
            CompanyUser.user_id == user_id,
            CompanyUser.company_id == company_id,
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def create(self, association: CompanyUser) -> CompanyUser:
        async with constraint_guard():
            self.session.add(association)
            await self.session.flush()
        return association

    async def delete(self, association: CompanyUser) -> None:
        await self.session.delete(association)
        await self.session.flush()

    async def list_by_company_id(self, company_id: str) -> List[CompanyUser]:
        statement = (
            select(CompanyUser)
            .where(CompanyUser.company_id == company_id)
            .order_by(CompanyUser.created_at)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_by_user_id(self, user_id: str) -> List[CompanyUser]:
        statement = (
            select(CompanyUser)
            .where(CompanyUser.user_id == user_id)
            .order_by(CompanyUser.created_at)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
