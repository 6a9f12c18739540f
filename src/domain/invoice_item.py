"""Invoice Item Domain Entity

Tracks individual line items within an invoice.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from sqlmodel import Field, Column, Index, Relationship
from sqlalchemy import ForeignKey, Integer, Numeric, String
from src.domain.base import BaseModel, generate_uuid

if TYPE_CHECKING:
    from src.domain.invoice import Invoice


class InvoiceItem(BaseModel, table=True):
    """
    Invoice Item - Line item owned by exactly one invoice

    Domain Rules:
    - quantity > 0, unit_price > 0
    - line_total = quantity * unit_price
    - No independent existence: removed with its invoice or when the
      invoice's item set is replaced
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        Index("ix_invoice_items_invoice_id", "invoice_id"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        max_length=36,
        description="Unique item identifier (UUID)"
    )

    invoice_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(36), ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Owning invoice"
    )

    position: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Order of the item within the invoice"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Quantity (must be > 0)"
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Price per unit (must be > 0, precision: 18,2)"
    )

    invoice: Optional["Invoice"] = Relationship(back_populates="items")

    @property
    def line_total(self) -> Decimal:
        return Decimal(self.unit_price) * self.quantity
