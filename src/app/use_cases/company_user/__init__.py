"""Company membership use cases"""
from .company_user_service import CompanyUserService
from .dtos import CompanyUserResponseDTO

__all__ = [
    "CompanyUserService",
    "CompanyUserResponseDTO",
]
