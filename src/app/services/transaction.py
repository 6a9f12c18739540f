"""Transaction Scope

Runs one service operation inside one unit of work and turns its outcome
into a Result:

- success: commit (unless read-only), Return.ok(value)
- DomainError: rollback, Return.err(error.to_error())
- anything else: rollback, Return.err(<OPERATION>_FAILED)
"""

import logging
from typing import Any, Awaitable, Callable, TypeVar
from src.libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import DomainError, ErrorKind

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TransactionScope:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def run(
        self,
        operation: str,
        work: Callable[..., Awaitable[T]],
        *args: Any,
        read_only: bool = False,
    ) -> Result[T]:
        """
        Execute work(*args) inside the unit of work

        Args:
            operation: snake_case operation name, used for logs and the
                generic failure code (e.g. "create_company" ->
                CREATE_COMPANY_FAILED)
            work: coroutine function doing validation, lookups and writes
            read_only: skip the commit

        Returns:
            Result wrapping the value returned by work
        """
        async with self.uow:
            try:
                value = await work(*args)
                if not read_only:
                    await self.uow.commit()
                return Return.ok(value)

            except DomainError as e:
                await self.uow.rollback()
                logger.warning(f"{operation} rejected: {e.code} - {e.message}")
                return Return.err(e.to_error())

            except Exception as e:
                await self.uow.rollback()
                logger.error(f"{operation} failed: {e}")
                return Return.err(
                    Error(
                        code=f"{operation.upper()}_FAILED",
                        message=f"Failed to {operation.replace('_', ' ')}",
                        reason=str(e),
                        kind=ErrorKind.UNEXPECTED.value,
                    )
                )
