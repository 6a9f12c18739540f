"""Authentication Service

Authenticates a user by email and password.
"""

import logging
from typing import Optional
from src.libs.result import Result
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.password_hasher import PasswordHasher
from src.app.services.transaction import TransactionScope
from src.app.repositories.user_repository import UserRepository
from src.app.use_cases.user.dtos import UserResponseDTO
from src.domain import validation
from src.domain.errors import AuthenticationError

logger = logging.getLogger(__name__)


class AuthService:
    """
    Business Rules:
    1. email must be present and well formed, password must be present
    2. Unknown email and wrong password fail with the same
       AUTHENTICATION_FAILED error so callers cannot enumerate users
    """

    def __init__(
        self,
        uow: UnitOfWork,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
    ):
        self.uow = uow
        self.user_repo = user_repo
        self.password_hasher = password_hasher
        self.transaction = TransactionScope(uow)

    async def authenticate(self, email: Optional[str], password: Optional[str]) -> Result[UserResponseDTO]:
        return await self.transaction.run("authenticate", self._authenticate, email, password, read_only=True)

    async def _authenticate(self, email: Optional[str], password: Optional[str]) -> UserResponseDTO:
        validation.require_not_blank("email", email)
        validation.require_not_blank("password", password)
        validation.validate_email(email)

        logger.debug(f"Authentication attempt for email={validation.mask_email(email)}")

        user = await self.user_repo.get_by_email(email)
        if not user:
            logger.debug(f"Authentication failed: user not found for email={validation.mask_email(email)}")
            raise AuthenticationError()

        if not self.password_hasher.verify(password, user.password_hash):
            logger.debug(f"Authentication failed: invalid credentials for email={validation.mask_email(email)}")
            raise AuthenticationError()

        logger.info(f"Authentication successful for userId={user.id}")
        return UserResponseDTO.from_entity(user)
