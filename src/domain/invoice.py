"""Invoice Domain Entity (aggregate root)

An invoice owns an ordered list of InvoiceItem rows. Items have no
existence outside their invoice: they are created, replaced and deleted
only through the invoice.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, List, Optional
from sqlmodel import Field, Column, Index, Relationship
from sqlalchemy import ForeignKey, Numeric, String, UniqueConstraint
from src.domain.base import BaseModel, generate_uuid, utcnow
from src.domain.errors import BusinessRuleError, ValidationError
from src.domain import validation

if TYPE_CHECKING:
    from src.domain.invoice_item import InvoiceItem


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    CREATED = "created"
    SENT = "sent"
    PAID = "paid"
    CANCELLED = "cancelled"


ALLOWED_TRANSITIONS: Dict[InvoiceStatus, FrozenSet[InvoiceStatus]] = {
    InvoiceStatus.CREATED: frozenset({InvoiceStatus.SENT, InvoiceStatus.CANCELLED}),
    InvoiceStatus.SENT: frozenset({InvoiceStatus.PAID, InvoiceStatus.CANCELLED}),
    InvoiceStatus.PAID: frozenset(),
    InvoiceStatus.CANCELLED: frozenset(),
}


def calculate_total(items: Iterable["InvoiceItem"]) -> Decimal:
    """Sum of quantity * unit_price using exact decimal arithmetic"""
    total = Decimal("0")
    for item in items:
        total += item.line_total
    return total


class Invoice(BaseModel, table=True):
    """
    Invoice - Billing document issued by a company to a client

    Domain Rules:
    - number is globally unique, format INV-YYYY-XXXX
    - company_id and client_id reference existing entities
    - at least one item at creation and after every item replacement
    - amount = sum(item.quantity * item.unit_price), never taken from input
    - status is set directly by default; with strict transitions enabled
      only created -> sent -> paid and created/sent -> cancelled are allowed
      (paid and cancelled terminal)
    """

    __tablename__ = "invoices"
    __table_args__ = (
        UniqueConstraint("number", name="uq_invoices_number"),
        Index("ix_invoices_company_id", "company_id"),
        Index("ix_invoices_client_id", "client_id"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        max_length=36,
        description="Unique invoice identifier (UUID)"
    )

    company_id: str = Field(
        sa_column=Column(String(36), ForeignKey("companies.id", ondelete="CASCADE"), nullable=False),
        description="Issuing company"
    )

    client_id: str = Field(
        sa_column=Column(String(36), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False),
        description="Billed client"
    )

    number: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="Unique invoice number (e.g., INV-2024-0001)"
    )

    due_date: Optional[datetime] = Field(
        default=None,
        description="Payment due date"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.CREATED,
        description="Invoice status (created, sent, paid, cancelled)"
    )

    amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Total amount derived from items (precision: 18,2)"
    )

    created_at: datetime = Field(default_factory=utcnow)

    updated_at: datetime = Field(default_factory=utcnow)

    items: List["InvoiceItem"] = Relationship(
        back_populates="invoice",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "lazy": "selectin",
            "order_by": "InvoiceItem.position",
        },
    )

    def replace_items(self, items: List["InvoiceItem"]) -> None:
        """
        Replace the whole item set and recompute the amount

        Every new item is validated before the old set is discarded, so a
        rejected replacement leaves the invoice unchanged.
        """
        if not items:
            raise ValidationError(
                "items",
                "Invoice must contain at least one item",
                "INVOICE_ITEMS_REQUIRED",
            )
        for item in items:
            validation.validate_item_quantity(item.quantity)
            validation.validate_item_unit_price(item.unit_price)

        for position, item in enumerate(items):
            item.position = position
        self.items = list(items)
        self.recalculate_amount()

    def recalculate_amount(self) -> Decimal:
        self.amount = calculate_total(self.items)
        return self.amount

    def can_transition_to(self, new_status: InvoiceStatus) -> bool:
        return new_status == self.status or new_status in ALLOWED_TRANSITIONS[self.status]

    def change_status(self, new_status: InvoiceStatus, strict: bool = False) -> None:
        """
        Move the invoice to new_status

        By default any target is accepted. With strict=True only transitions
        from ALLOWED_TRANSITIONS are accepted. Re-applying the current status is a no-op.
        """
        if new_status == self.status:
            return
        if strict and not self.can_transition_to(new_status):
            raise BusinessRuleError(
                f"Illegal invoice status transition: {self.status.value} -> {new_status.value}",
                "ILLEGAL_STATUS_TRANSITION",
            )
        self.status = new_status
        self.touch()
