"""Invoice use cases"""
from .invoice_service import InvoiceService
from .dtos import (
    InvoiceItemCommandDTO,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    InvoiceItemDTO,
    InvoiceResponseDTO,
)

__all__ = [
    "InvoiceService",
    "InvoiceItemCommandDTO",
    "CreateInvoiceCommandDTO",
    "UpdateInvoiceCommandDTO",
    "InvoiceItemDTO",
    "InvoiceResponseDTO",
]
