"""Company use cases"""
from .company_service import CompanyService
from .dtos import CreateCompanyCommandDTO, UpdateCompanyCommandDTO, CompanyResponseDTO

__all__ = [
    "CompanyService",
    "CreateCompanyCommandDTO",
    "UpdateCompanyCommandDTO",
    "CompanyResponseDTO",
]
