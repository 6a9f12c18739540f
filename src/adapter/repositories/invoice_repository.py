"""SQLAlchemy Invoice Repository Implementation

Invoices are always loaded with their items (selectin) so that item
replacement and cascading deletes work inside an async session.
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import selectinload
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.adapter.repositories.constraints import constraint_guard
from src.domain.invoice import Invoice


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Features:
    - Items are written with the invoice (cascade="all, delete-orphan")
    - Replaced items are deleted in the same flush
    - Invoice number uniqueness backed by uq_invoices_number
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        statement = (
            select(Invoice)
            .options(selectinload(Invoice.items))
            .where(Invoice.id == invoice_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_number(self, number: str) -> Optional[Invoice]:
        statement = (
            select(Invoice)
            .options(selectinload(Invoice.items))
            .where(Invoice.number == number)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def exists_by_number(self, number: str) -> bool:
        statement = select(func.count()).select_from(Invoice).where(Invoice.number == number)
        result = await self.session.execute(statement)
        return result.scalar_one() > 0

    async def list_by_company_id(self, company_id: str) -> List[Invoice]:
        statement = (
            select(Invoice)
            .options(selectinload(Invoice.items))
            .where(Invoice.company_id == company_id)
            .order_by(Invoice.created_at.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_by_client_id(self, client_id: str) -> List[Invoice]:
        statement = (
            select(Invoice)
            .options(selectinload(Invoice.items))
            .where(Invoice.client_id == client_id)
            .order_by(Invoice.created_at.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def create(self, invoice: Invoice) -> Invoice:
        async with constraint_guard():
            self.session.add(invoice)
            await self.session.flush()
        return invoice

    async def update(self, invoice: Invoice) -> Invoice:
        invoice.updated_at = datetime.utcnow()
        async with constraint_guard():
            self.session.add(invoice)
            await self.session.flush()
        return invoice

    async def delete(self, invoice: Invoice) -> None:
        await self.session.delete(invoice)
        await self.session.flush()
