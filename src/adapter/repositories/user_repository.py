"""SQLAlchemy User Repository Implementation"""

from typing import Optional
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.user_repository import UserRepository
from src.adapter.repositories.constraints import constraint_guard
from src.domain.user import User


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: str) -> Optional[User]:
        statement = select(User).where(User.id == user_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        statement = select(User).where(User.email == email)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        statement = select(func.count()).select_from(User).where(User.email == email)
        result = await self.session.execute(statement)
        return result.scalar_one() > 0

    async def create(self, user: User) -> User:
        async with constraint_guard():
            self.session.add(user)
            await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete(self, user: User) -> None:
        await self.session.delete(user)
        await self.session.flush()
