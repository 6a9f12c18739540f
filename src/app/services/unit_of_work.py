"""Unit of Work Interface

One unit of work spans exactly one service operation. Leaving the context
always rolls back whatever was not committed.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    @abstractmethod
    async def commit(self):
        """
        Commit all pending writes

        Raises:
            BusinessRuleError: when a unique constraint fires at commit time
        """
        pass

    @abstractmethod
    async def rollback(self):
        pass
