from .user_repository import UserRepository
from .company_repository import CompanyRepository
from .company_user_repository import CompanyUserRepository
from .client_repository import ClientRepository
from .invoice_repository import InvoiceRepository

__all__ = [
    "UserRepository",
    "CompanyRepository",
    "CompanyUserRepository",
    "ClientRepository",
    "InvoiceRepository",
]
