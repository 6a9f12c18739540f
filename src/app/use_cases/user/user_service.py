"""User Service

Registration, lookup and deletion of users.
"""

import logging
from src.libs.result import Result
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.password_hasher import PasswordHasher
from src.app.services.transaction import TransactionScope
from src.app.repositories.user_repository import UserRepository
from src.domain import validation
from src.domain.errors import BusinessRuleError, EntityNotFoundError
from src.domain.user import User
from .dtos import RegisterUserCommandDTO, UserResponseDTO

logger = logging.getLogger(__name__)


class UserService:
    """
    Business Rules:
    1. first/last name follow the person-name rule
    2. email is well formed and unique
    3. password has at least 8 characters and is stored only as a digest
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

    async def register(self, command: RegisterUserCommandDTO) -> Result[UserResponseDTO]:
        """
        Register a new user

        Flow:
        1. Validate names, email and password
        2. Reject duplicate email
        3. Hash password and persist user
        4. Commit and return the public projection
        """
        return await self.transaction.run("register_user", self._register, command)

    async def get_by_id(self, user_id: str) -> Result[UserResponseDTO]:
        return await self.transaction.run("get_user", self._get_by_id, user_id, read_only=True)

    async def delete(self, user_id: str) -> Result[None]:
        return await self.transaction.run("delete_user", self._delete, user_id)

    async def _register(self, command: RegisterUserCommandDTO) -> UserResponseDTO:
        logger.debug(f"User registration started for email={validation.mask_email(command.email)}")

        # Step 1: Field validation
        validation.validate_person_name("first_name", command.first_name)
        validation.validate_person_name("last_name", command.last_name)
        validation.validate_email(command.email)
        validation.validate_password(command.password)

        # Step 2: Uniqueness pre-check (constraint stays authoritative)
        if await self.user_repo.exists_by_email(command.email):
            raise BusinessRuleError("A user with this email already exists", "EMAIL_ALREADY_EXISTS")

        # Step 3: Persist with hashed password
        user = User(
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
            password_hash=self.password_hasher.hash(command.password),
        )
        created_user = await self.user_repo.create(user)

        logger.info(f"User registered successfully with id={created_user.id}")
        return UserResponseDTO.from_entity(created_user)

    async def _get_by_id(self, user_id: str) -> UserResponseDTO:
        validation.require("user_id", user_id)
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise EntityNotFoundError("User", user_id)
        return UserResponseDTO.from_entity(user)

    async def _delete(self, user_id: str) -> None:
        logger.debug(f"User deletion requested for userId={user_id}")
        validation.require("user_id", user_id)

        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise EntityNotFoundError("User", user_id)

        await self.user_repo.delete(user)
        logger.info(f"User deleted successfully with userId={user_id}")
