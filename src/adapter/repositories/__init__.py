from .user_repository import SqlAlchemyUserRepository
from .company_repository import SqlAlchemyCompanyRepository
from .company_user_repository import SqlAlchemyCompanyUserRepository
from .client_repository import SqlAlchemyClientRepository
from .invoice_repository import SqlAlchemyInvoiceRepository

__all__ = [
    "SqlAlchemyUserRepository",
    "SqlAlchemyCompanyRepository",
    "SqlAlchemyCompanyUserRepository",
    "SqlAlchemyClientRepository",
    "SqlAlchemyInvoiceRepository",
]
