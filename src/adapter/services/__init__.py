from .unit_of_work import SqlAlchemyUnitOfWork
from .password_hasher import BcryptPasswordHasher

__all__ = [
    "SqlAlchemyUnitOfWork",
    "BcryptPasswordHasher",
]
