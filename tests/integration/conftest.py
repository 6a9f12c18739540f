import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.bootstrap import create_schema
from src.depends import build_services


@pytest_asyncio.fixture(scope="function")
async def engine():
    """Create test database engine using an in-memory SQLite database"""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        future=True,
        poolclass=StaticPool,
    )

    await create_schema(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def services(db_session):
    """All services wired to the test session, with a fast bcrypt work factor"""
    return build_services(
        db_session,
        password_hasher=BcryptPasswordHasher(rounds=4),
        strict_status_transitions=False,
    )


@pytest_asyncio.fixture
async def strict_services(db_session):
    """Same wiring with the invoice transition table enforced"""
    return build_services(
        db_session,
        password_hasher=BcryptPasswordHasher(rounds=4),
        strict_status_transitions=True,
    )


@pytest_asyncio.fixture
async def registered_user(services):
    from src.app.use_cases.user.dtos import RegisterUserCommandDTO

    result = await services.users.register(
        RegisterUserCommandDTO(
            first_name="John",
            last_name="Doe",
            email="john@example.com",
            password="password1",
        )
    )
    assert result.is_ok()
    return result.value


@pytest_asyncio.fixture
async def company(services, registered_user):
    from src.app.use_cases.company.dtos import CreateCompanyCommandDTO

    result = await services.companies.create(
        registered_user.user_id,
        CreateCompanyCommandDTO(org_num="123456-7890", name="Acme", city="Stockholm"),
    )
    assert result.is_ok()
    return result.value


@pytest_asyncio.fixture
async def client(services, company):
    from src.app.use_cases.client.dtos import CreateClientCommandDTO

    result = await services.clients.create(
        CreateClientCommandDTO(
            company_id=company.company_id,
            first_name="Anna",
            last_name="Smith",
            email="anna@client.com",
        )
    )
    assert result.is_ok()
    return result.value
