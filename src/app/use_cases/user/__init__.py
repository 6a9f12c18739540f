"""User use cases"""
from .user_service import UserService
from .dtos import RegisterUserCommandDTO, UserResponseDTO

__all__ = [
    "UserService",
    "RegisterUserCommandDTO",
    "UserResponseDTO",
]
