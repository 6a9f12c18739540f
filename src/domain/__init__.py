from .base import BaseModel, generate_uuid
from .errors import (
    ErrorKind,
    DomainError,
    ValidationError,
    EntityNotFoundError,
    BusinessRuleError,
    AuthenticationError,
)
from .user import User
from .company import Company
from .company_user import CompanyUser
from .client import Client
from .invoice import Invoice, InvoiceStatus, ALLOWED_TRANSITIONS, calculate_total
from .invoice_item import InvoiceItem

__all__ = [
    "BaseModel",
    "generate_uuid",
    "ErrorKind",
    "DomainError",
    "ValidationError",
    "EntityNotFoundError",
    "BusinessRuleError",
    "AuthenticationError",
    "User",
    "Company",
    "CompanyUser",
    "Client",
    "Invoice",
    "InvoiceStatus",
    "ALLOWED_TRANSITIONS",
    "calculate_total",
    "InvoiceItem",
]
