from dataclasses import dataclass
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.repositories import (
    SqlAlchemyUserRepository,
    SqlAlchemyCompanyRepository,
    SqlAlchemyCompanyUserRepository,
    SqlAlchemyClientRepository,
    SqlAlchemyInvoiceRepository,
)
from src.adapter.services import SqlAlchemyUnitOfWork, BcryptPasswordHasher
from src.app.services.password_hasher import PasswordHasher
from src.app.use_cases.auth import AuthService
from src.app.use_cases.client import ClientService
from src.app.use_cases.company import CompanyService
from src.app.use_cases.company_user import CompanyUserService
from src.app.use_cases.invoice import InvoiceService
from src.app.use_cases.user import UserService

engine = create_async_engine(ApplicationConfig.DB_URI, echo=ApplicationConfig.DB_ECHO, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@dataclass
class ServiceContainer:
    """All aggregate services bound to one session / unit of work"""

    users: UserService
    companies: CompanyService
    company_users: CompanyUserService
    clients: ClientService
    invoices: InvoiceService
    auth: AuthService


def build_services(
    session: AsyncSession,
    password_hasher: Optional[PasswordHasher] = None,
    strict_status_transitions: Optional[bool] = None,
) -> ServiceContainer:
    uow = SqlAlchemyUnitOfWork(session)
    hasher = password_hasher or BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
    if strict_status_transitions is None:
        strict_status_transitions = ApplicationConfig.STRICT_STATUS_TRANSITIONS

    user_repo = SqlAlchemyUserRepository(session)
    company_repo = SqlAlchemyCompanyRepository(session)
    company_user_repo = SqlAlchemyCompanyUserRepository(session)
    client_repo = SqlAlchemyClientRepository(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)

    return ServiceContainer(
        users=UserService(uow, user_repo, hasher),
        companies=CompanyService(uow, company_repo, company_user_repo, user_repo),
        company_users=CompanyUserService(uow, user_repo, company_user_repo, company_repo),
        clients=ClientService(uow, client_repo, company_repo),
        invoices=InvoiceService(
            uow,
            invoice_repo,
            company_repo,
            client_repo,
            strict_status_transitions=strict_status_transitions,
        ),
        auth=AuthService(uow, user_repo, hasher),
    )


async def get_services():
    async with AsyncSessionLocal() as session:
        yield build_services(session)
