"""Unit tests for CompanyService

Tests cover:
- Company creation with creator membership
- Duplicate org_num (nothing persisted)
- Missing creator
- Partial update and deletion
"""

import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.company import CompanyService
from src.app.use_cases.company.dtos import CreateCompanyCommandDTO, UpdateCompanyCommandDTO
from src.domain.company import Company
from src.domain.user import User


@pytest.fixture
def mock_company_repo():
    return MagicMock()


@pytest.fixture
def mock_company_user_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=lambda association: association)
    return repo


@pytest.fixture
def mock_user_repo():
    return MagicMock()


@pytest.fixture
def company_service(mock_uow, mock_company_repo, mock_company_user_repo, mock_user_repo):
    return CompanyService(
        uow=mock_uow,
        company_repo=mock_company_repo,
        company_user_repo=mock_company_user_repo,
        user_repo=mock_user_repo,
    )


@pytest.fixture
def creator():
    return User(
        id="user_1",
        first_name="John",
        last_name="Doe",
        email="john@example.com",
        password_hash="hashed::password1",
    )


@pytest.fixture
def sample_command():
    return CreateCompanyCommandDTO(
        org_num="123456-7890",
        name="Acme",
        email="billing@acme.com",
        phone_number="+46 70 123 45 67",
        city="Stockholm",
        country="Sweden",
    )


@pytest.fixture
def sample_company():
    return Company(
        id="company_1",
        org_num="123456-7890",
        name="Acme",
        email="billing@acme.com",
        city="Stockholm",
        created_at=datetime.utcnow(),
        updated_at=datetime.utcnow(),
    )


@pytest.mark.asyncio
class TestCreateCompany:
    """Test company creation"""

    async def test_create_company_adds_creator_membership(
        self,
        company_service,
        mock_company_repo,
        mock_company_user_repo,
        mock_user_repo,
        mock_uow,
        creator,
        sample_command,
    ):
        """
        Given: Existing creator and unused org_num
        When: create is called
        Then: Company persisted, creator associated, single commit
        """
        # Arrange
        mock_user_repo.get_by_id = AsyncMock(return_value=creator)
        mock_company_repo.exists_by_org_num = AsyncMock(return_value=False)
        mock_company_repo.create = AsyncMock(side_effect=lambda company: company)

        # Act
        result = await company_service.create("user_1", sample_command)

        # Assert
        assert result.is_ok()
        response = result.value
        assert response.org_num == "123456-7890"
        assert response.name == "Acme"

        association = mock_company_user_repo.create.call_args[0][0]
        assert association.user_id == "user_1"
        assert association.company_id == response.company_id
        mock_uow.commit.assert_called_once()

    async def test_create_company_duplicate_org_num(
        self,
        company_service,
        mock_company_repo,
        mock_company_user_repo,
        mock_user_repo,
        mock_uow,
        creator,
        sample_command,
    ):
        """
        Given: org_num already registered
        When: create is called
        Then: ORG_NUM_EXISTS, neither company nor membership persisted
        """
        # Arrange
        mock_user_repo.get_by_id = AsyncMock(return_value=creator)
        mock_company_repo.exists_by_org_num = AsyncMock(return_value=True)
        mock_company_repo.create = AsyncMock()

        # Act
        result = await company_service.create("user_1", sample_command)

        # Assert
        assert result.is_err()
        assert result.error.code == "ORG_NUM_EXISTS"
        assert result.error.kind == "BUSINESS_RULE"
        mock_company_repo.create.assert_not_called()
        mock_company_user_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_create_company_missing_creator(
        self, company_service, mock_company_repo, mock_user_repo, sample_command
    ):
        mock_user_repo.get_by_id = AsyncMock(return_value=None)
        mock_company_repo.create = AsyncMock()

        result = await company_service.create("ghost", sample_command)

        assert result.is_err()
        assert result.error.code == "USER_NOT_FOUND"
        mock_company_repo.create.assert_not_called()

    async def test_create_company_requires_creator_id(self, company_service, sample_command):
        result = await company_service.create(None, sample_command)

        assert result.is_err()
        assert result.error.code == "CREATOR_USER_ID_REQUIRED"

    @pytest.mark.parametrize(
        "overrides, code",
        [
            ({"org_num": None}, "ORG_NUM_REQUIRED"),
            ({"org_num": "1234567890"}, "ORG_NUM_INVALID"),
            ({"org_num": "123456-7890\n"}, "ORG_NUM_INVALID"),
            ({"name": "A"}, "COMPANY_NAME_TOO_SHORT"),
            ({"name": "A" * 21}, "COMPANY_NAME_TOO_LONG"),
            ({"email": "acme"}, "EMAIL_INVALID"),
            ({"phone_number": "abc"}, "PHONE_INVALID"),
            ({"address": "A" * 71}, "ADDRESS_TOO_LONG"),
        ],
    )
    async def test_create_company_invalid_fields(
        self, company_service, mock_user_repo, mock_company_repo, sample_command, overrides, code
    ):
        mock_user_repo.get_by_id = AsyncMock()
        mock_company_repo.create = AsyncMock()

        result = await company_service.create("user_1", sample_command.model_copy(update=overrides))

        assert result.is_err()
        assert result.error.code == code
        mock_user_repo.get_by_id.assert_not_called()
        mock_company_repo.create.assert_not_called()

    @pytest.mark.parametrize("email", [None, "", "   "])
    async def test_blank_optional_email_accepted(
        self, company_service, mock_company_repo, mock_user_repo, creator, sample_command, email
    ):
        """
        Given: Company email left blank (optional like phone and address)
        When: create is called
        Then: Company created
        """
        mock_user_repo.get_by_id = AsyncMock(return_value=creator)
        mock_company_repo.exists_by_org_num = AsyncMock(return_value=False)
        mock_company_repo.create = AsyncMock(side_effect=lambda company: company)

        result = await company_service.create(
            "user_1",
            sample_command.model_copy(update={"email": email, "phone_number": "", "address": ""}),
        )

        assert result.is_ok()

    async def test_membership_failure_rolls_back(
        self,
        company_service,
        mock_company_repo,
        mock_company_user_repo,
        mock_user_repo,
        mock_uow,
        creator,
        sample_command,
    ):
        """
        Given: Membership insert fails after the company insert
        When: create is called
        Then: Rollback, CREATE_COMPANY_FAILED, no commit
        """
        mock_user_repo.get_by_id = AsyncMock(return_value=creator)
        mock_company_repo.exists_by_org_num = AsyncMock(return_value=False)
        mock_company_repo.create = AsyncMock(side_effect=lambda company: company)
        mock_company_user_repo.create = AsyncMock(side_effect=Exception("insert failed"))

        result = await company_service.create("user_1", sample_command)

        assert result.is_err()
        assert result.error.code == "CREATE_COMPANY_FAILED"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestUpdateCompany:
    async def test_partial_update_keeps_other_fields(
        self, company_service, mock_company_repo, mock_uow, sample_company
    ):
        """
        Given: Company with name, email and city
        When: update is called with only a new name
        Then: name changes, email/city/org_num unchanged
        """
        mock_company_repo.get_by_id = AsyncMock(return_value=sample_company)
        mock_company_repo.update = AsyncMock(side_effect=lambda company: company)

        result = await company_service.update("company_1", UpdateCompanyCommandDTO(name="Acme AB"))

        assert result.is_ok()
        assert result.value.name == "Acme AB"
        assert result.value.email == "billing@acme.com"
        assert result.value.city == "Stockholm"
        assert result.value.org_num == "123456-7890"
        mock_uow.commit.assert_called_once()

    async def test_update_invalid_field(self, company_service, mock_company_repo, sample_company):
        mock_company_repo.get_by_id = AsyncMock(return_value=sample_company)
        mock_company_repo.update = AsyncMock()

        result = await company_service.update("company_1", UpdateCompanyCommandDTO(name="X"))

        assert result.is_err()
        assert result.error.code == "COMPANY_NAME_TOO_SHORT"
        mock_company_repo.update.assert_not_called()

    async def test_update_missing_company(self, company_service, mock_company_repo):
        mock_company_repo.get_by_id = AsyncMock(return_value=None)

        result = await company_service.update("missing", UpdateCompanyCommandDTO(name="Acme AB"))

        assert result.is_err()
        assert result.error.code == "COMPANY_NOT_FOUND"


@pytest.mark.asyncio
class TestDeleteAndGetCompany:
    async def test_delete_company(self, company_service, mock_company_repo, mock_uow, sample_company):
        mock_company_repo.get_by_id = AsyncMock(return_value=sample_company)
        mock_company_repo.delete = AsyncMock()

        result = await company_service.delete("company_1")

        assert result.is_ok()
        mock_company_repo.delete.assert_called_once_with(sample_company)
        mock_uow.commit.assert_called_once()

    async def test_delete_missing_company(self, company_service, mock_company_repo):
        mock_company_repo.get_by_id = AsyncMock(return_value=None)
        mock_company_repo.delete = AsyncMock()

        result = await company_service.delete("missing")

        assert result.is_err()
        assert result.error.code == "COMPANY_NOT_FOUND"
        mock_company_repo.delete.assert_not_called()

    async def test_get_entity(self, company_service, mock_company_repo, sample_company):
        mock_company_repo.get_by_id = AsyncMock(return_value=sample_company)

        result = await company_service.get_entity("company_1")

        assert result.is_ok()
        assert result.value is sample_company

    async def test_get_by_id_requires_id(self, company_service):
        result = await company_service.get_by_id(None)

        assert result.is_err()
        assert result.error.code == "COMPANY_ID_REQUIRED"
