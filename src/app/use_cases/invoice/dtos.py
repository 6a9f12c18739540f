"""Data Transfer Objects for Invoice Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem


class InvoiceItemCommandDTO(BaseModel):
    """Line item input. Positivity is checked by the domain, not here."""

    quantity: Optional[int] = Field(default=None, description="Quantity (must be > 0)")
    unit_price: Optional[Decimal] = Field(default=None, description="Price per unit (must be > 0)")

    def to_entity(self) -> InvoiceItem:
        return InvoiceItem(quantity=self.quantity, unit_price=self.unit_price)


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    The amount is not accepted from the caller; it is derived from items.
    """

    company_id: Optional[str] = Field(default=None, description="Issuing company ID")
    client_id: Optional[str] = Field(default=None, description="Billed client ID")
    number: Optional[str] = Field(default=None, description="Invoice number (INV-YYYY-XXXX)")
    due_date: Optional[datetime] = Field(default=None, description="Payment due date")
    items: Optional[List[InvoiceItemCommandDTO]] = Field(
        default=None,
        description="Line items (at least one)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "company_id": "7d1c1f0e-3c1a-4a57-9f7e-2b8c1b2d9a10",
                "client_id": "0b9f54a2-9a0e-4d1e-b0f6-1b3c5d7e9f11",
                "number": "INV-2024-0001",
                "due_date": "2024-02-14T00:00:00Z",
                "items": [
                    {"quantity": 2, "unit_price": "500.00"},
                    {"quantity": 1, "unit_price": "10.00"},
                ],
            }
        }


class UpdateInvoiceCommandDTO(BaseModel):
    """
    Patch DTO for updating an invoice

    items, when present, replaces the whole item set.
    """

    invoice_id: Optional[str] = Field(default=None, description="Invoice to update")
    due_date: Optional[datetime] = Field(default=None, description="New due date")
    status: Optional[InvoiceStatus] = Field(default=None, description="New status")
    items: Optional[List[InvoiceItemCommandDTO]] = Field(
        default=None,
        description="Replacement item set (not merged)"
    )


class InvoiceItemDTO(BaseModel):
    item_id: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal

    @classmethod
    def from_entity(cls, item: InvoiceItem) -> "InvoiceItemDTO":
        return cls(
            item_id=item.id,
            quantity=item.quantity,
            unit_price=item.unit_price,
            line_total=item.line_total,
        )


class InvoiceResponseDTO(BaseModel):
    """Projection of an invoice and its items"""

    invoice_id: str = Field(..., description="Invoice ID")
    company_id: str = Field(..., description="Issuing company ID")
    client_id: str = Field(..., description="Billed client ID")
    number: str = Field(..., description="Invoice number")
    status: str = Field(..., description="Invoice status (created, sent, paid, cancelled)")
    due_date: Optional[datetime] = Field(default=None, description="Payment due date")
    amount: Decimal = Field(..., description="Sum of quantity * unit_price over items")
    items: List[InvoiceItemDTO] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, invoice: Invoice) -> "InvoiceResponseDTO":
        return cls(
            invoice_id=invoice.id,
            company_id=invoice.company_id,
            client_id=invoice.client_id,
            number=invoice.number,
            status=invoice.status.value,
            due_date=invoice.due_date,
            amount=invoice.amount,
            items=[InvoiceItemDTO.from_entity(item) for item in invoice.items],
            created_at=invoice.created_at,
            updated_at=invoice.updated_at,
        )
