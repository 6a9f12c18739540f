"""Unit tests for UserService

Tests cover:
- Registration with hashed password
- Field validation failures (nothing persisted)
- Duplicate email
- Lookup and deletion
"""

import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.user import UserService
from src.app.use_cases.user.dtos import RegisterUserCommandDTO
from src.domain.user import User


@pytest.fixture
def mock_user_repo():
    """Mock user repository"""
    return MagicMock()


@pytest.fixture
def user_service(mock_uow, mock_user_repo, mock_password_hasher):
    return UserService(
        uow=mock_uow,
        user_repo=mock_user_repo,
        password_hasher=mock_password_hasher,
    )


@pytest.fixture
def sample_command():
    return RegisterUserCommandDTO(
        first_name="John",
        last_name="Doe",
        email="john@example.com",
        password="password1",
    )


@pytest.fixture
def sample_user():
    return User(
        id="user_1",
        first_name="John",
        last_name="Doe",
        email="john@example.com",
        password_hash="hashed::password1",
        created_at=datetime.utcnow(),
        updated_at=datetime.utcnow(),
    )


@pytest.mark.asyncio
class TestRegisterUser:
    """Test user registration"""

    async def test_register_user_success(
        self, user_service, mock_user_repo, mock_password_hasher, mock_uow, sample_command
    ):
        """
        Given: Valid registration data and unused email
        When: register is called
        Then: User persisted with hashed password, projection returned
        """
        # Arrange
        mock_user_repo.exists_by_email = AsyncMock(return_value=False)
        mock_user_repo.create = AsyncMock(side_effect=lambda user: user)

        # Act
        result = await user_service.register(sample_command)

        # Assert
        assert result.is_ok()
        response = result.value
        assert response.email == "john@example.com"
        assert response.first_name == "John"
        assert not hasattr(response, "password_hash")

        created_user = mock_user_repo.create.call_args[0][0]
        assert created_user.password_hash == "hashed::password1"
        mock_password_hasher.hash.assert_called_once_with("password1")
        mock_uow.commit.assert_called_once()

    async def test_register_duplicate_email(self, user_service, mock_user_repo, mock_uow, sample_command):
        """
        Given: Email already registered
        When: register is called
        Then: EMAIL_ALREADY_EXISTS, nothing persisted
        """
        # Arrange
        mock_user_repo.exists_by_email = AsyncMock(return_value=True)
        mock_user_repo.create = AsyncMock()

        # Act
        result = await user_service.register(sample_command)

        # Assert
        assert result.is_err()
        assert result.error.code == "EMAIL_ALREADY_EXISTS"
        assert result.error.kind == "BUSINESS_RULE"
        mock_user_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()
        mock_uow.rollback.assert_called_once()

    @pytest.mark.parametrize(
        "overrides, code, field",
        [
            ({"first_name": "J"}, "NAME_TOO_SHORT", "first_name"),
            ({"last_name": "D0e"}, "NAME_INVALID_CHARS", "last_name"),
            ({"email": "john@"}, "EMAIL_INVALID", "email"),
            ({"email": "john@example.com\n"}, "EMAIL_INVALID", "email"),
            ({"email": None}, "EMAIL_REQUIRED", "email"),
            ({"password": "short"}, "PASSWORD_TOO_SHORT", "password"),
        ],
    )
    async def test_register_invalid_fields(
        self, user_service, mock_user_repo, sample_command, overrides, code, field
    ):
        # Arrange
        mock_user_repo.exists_by_email = AsyncMock(return_value=False)
        mock_user_repo.create = AsyncMock()
        command = sample_command.model_copy(update=overrides)

        # Act
        result = await user_service.register(command)

        # Assert
        assert result.is_err()
        assert result.error.code == code
        assert result.error.field == field
        assert result.error.kind == "VALIDATION"
        mock_user_repo.exists_by_email.assert_not_called()
        mock_user_repo.create.assert_not_called()

    async def test_register_repository_failure(self, user_service, mock_user_repo, mock_uow, sample_command):
        """
        Given: Repository raises an unexpected exception
        When: register is called
        Then: Rollback, REGISTER_USER_FAILED
        """
        mock_user_repo.exists_by_email = AsyncMock(return_value=False)
        mock_user_repo.create = AsyncMock(side_effect=Exception("Database connection failed"))

        result = await user_service.register(sample_command)

        assert result.is_err()
        assert result.error.code == "REGISTER_USER_FAILED"
        assert result.error.kind == "UNEXPECTED"
        assert "Database connection failed" in result.error.reason
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestGetAndDeleteUser:
    async def test_get_by_id(self, user_service, mock_user_repo, mock_uow, sample_user):
        mock_user_repo.get_by_id = AsyncMock(return_value=sample_user)

        result = await user_service.get_by_id("user_1")

        assert result.is_ok()
        assert result.value.user_id == "user_1"
        mock_uow.commit.assert_not_called()

    async def test_projection_is_idempotent(self, user_service, mock_user_repo, sample_user):
        mock_user_repo.get_by_id = AsyncMock(return_value=sample_user)

        first = await user_service.get_by_id("user_1")
        second = await user_service.get_by_id("user_1")

        assert first.value == second.value

    async def test_get_missing_user(self, user_service, mock_user_repo):
        mock_user_repo.get_by_id = AsyncMock(return_value=None)

        result = await user_service.get_by_id("missing")

        assert result.is_err()
        assert result.error.code == "USER_NOT_FOUND"
        assert result.error.kind == "ENTITY_NOT_FOUND"

    async def test_delete_user(self, user_service, mock_user_repo, mock_uow, sample_user):
        mock_user_repo.get_by_id = AsyncMock(return_value=sample_user)
        mock_user_repo.delete = AsyncMock()

        result = await user_service.delete("user_1")

        assert result.is_ok()
        mock_user_repo.delete.assert_called_once_with(sample_user)
        mock_uow.commit.assert_called_once()

    async def test_delete_missing_user(self, user_service, mock_user_repo):
        mock_user_repo.get_by_id = AsyncMock(return_value=None)
        mock_user_repo.delete = AsyncMock()

        result = await user_service.delete("missing")

        assert result.is_err()
        assert result.error.code == "USER_NOT_FOUND"
        mock_user_repo.delete.assert_not_called()

    async def test_delete_requires_id(self, user_service):
        result = await user_service.delete(None)

        assert result.is_err()
        assert result.error.code == "USER_ID_REQUIRED"
