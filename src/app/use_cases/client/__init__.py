"""Client use cases"""
from .client_service import ClientService
from .dtos import CreateClientCommandDTO, UpdateClientCommandDTO, ClientResponseDTO

__all__ = [
    "ClientService",
    "CreateClientCommandDTO",
    "UpdateClientCommandDTO",
    "ClientResponseDTO",
]
