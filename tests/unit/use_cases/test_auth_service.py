"""Unit tests for AuthService"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.auth import AuthService
from src.domain.user import User


@pytest.fixture
def mock_user_repo():
    return MagicMock()


@pytest.fixture
def auth_service(mock_uow, mock_user_repo, mock_password_hasher):
    return AuthService(uow=mock_uow, user_repo=mock_user_repo, password_hasher=mock_password_hasher)


@pytest.fixture
def sample_user():
    return User(
        id="user_1",
        first_name="John",
        last_name="Doe",
        email="john@example.com",
        password_hash="hashed::password1",
    )


@pytest.mark.asyncio
class TestAuthenticate:
    async def test_valid_credentials(self, auth_service, mock_user_repo, mock_uow, sample_user):
        # Arrange
        mock_user_repo.get_by_email = AsyncMock(return_value=sample_user)

        # Act
        result = await auth_service.authenticate("john@example.com", "password1")

        # Assert
        assert result.is_ok()
        assert result.value.user_id == "user_1"
        mock_uow.commit.assert_not_called()

    async def test_unknown_email_and_wrong_password_are_indistinguishable(
        self, auth_service, mock_user_repo, sample_user
    ):
        """
        Given: One unknown email and one wrong password
        When: authenticate is called for each
        Then: Both errors carry the same code, kind and message
        """
        mock_user_repo.get_by_email = AsyncMock(return_value=None)
        unknown = await auth_service.authenticate("ghost@example.com", "password1")

        mock_user_repo.get_by_email = AsyncMock(return_value=sample_user)
        wrong_password = await auth_service.authenticate("john@example.com", "wrong-password")

        assert unknown.is_err() and wrong_password.is_err()
        assert unknown.error.code == wrong_password.error.code == "AUTHENTICATION_FAILED"
        assert unknown.error.kind == wrong_password.error.kind == "AUTHENTICATION"
        assert unknown.error.message == wrong_password.error.message

    @pytest.mark.parametrize(
        "email, password, code",
        [
            (None, "password1", "EMAIL_REQUIRED"),
            ("  ", "password1", "EMAIL_REQUIRED"),
            ("john@example.com", "", "PASSWORD_REQUIRED"),
            ("john", "password1", "EMAIL_INVALID"),
        ],
    )
    async def test_invalid_input(self, auth_service, mock_user_repo, email, password, code):
        mock_user_repo.get_by_email = AsyncMock()

        result = await auth_service.authenticate(email, password)

        assert result.is_err()
        assert result.error.code == code
        mock_user_repo.get_by_email.assert_not_called()

    async def test_short_password_is_not_a_validation_error(self, auth_service, mock_user_repo, sample_user):
        mock_user_repo.get_by_email = AsyncMock(return_value=sample_user)

        result = await auth_service.authenticate("john@example.com", "short")

        assert result.is_err()
        assert result.error.code == "AUTHENTICATION_FAILED"
