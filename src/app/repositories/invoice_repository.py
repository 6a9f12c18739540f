"""Invoice Repository Interface

Defines the contract for invoice persistence operations. Invoices are
loaded and stored together with their items.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    The invoice is the aggregate root: create/update/delete also write
    its items within the caller's unit of work.
    """

    @abstractmethod
    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        """
        Retrieve invoice by ID with its items loaded

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_number(self, number: str) -> Optional[Invoice]:
        """
        Retrieve invoice by invoice number

        Args:
            number: Unique invoice number

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_number(self, number: str) -> bool:
        """
        Check if an invoice number is already in use

        Used as a fast pre-check; the unique constraint stays authoritative.
        """
        pass

    @abstractmethod
    async def list_by_company_id(self, company_id: str) -> List[Invoice]:
        pass

    @abstractmethod
    async def list_by_client_id(self, client_id: str) -> List[Invoice]:
        pass

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice together with its items

        Raises:
            BusinessRuleError: INVOICE_NUMBER_EXISTS if the unique constraint fires
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Items removed from invoice.items are deleted in the same flush.
        """
        pass

    @abstractmethod
    async def delete(self, invoice: Invoice) -> None:
        """Delete the invoice and all of its items"""
        pass
