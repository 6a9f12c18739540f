from .unit_of_work import UnitOfWork
from .password_hasher import PasswordHasher
from .transaction import TransactionScope

__all__ = [
    "UnitOfWork",
    "PasswordHasher",
    "TransactionScope",
]
