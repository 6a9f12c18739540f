"""Client Service

Clients always belong to an existing company and support partial updates.
"""

import logging
from typing import List, Optional
from src.libs.result import Result
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.transaction import TransactionScope
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.company_repository import CompanyRepository
from src.domain import validation
from src.domain.client import Client
from src.domain.errors import EntityNotFoundError
from .dtos import CreateClientCommandDTO, UpdateClientCommandDTO, ClientResponseDTO

logger = logging.getLogger(__name__)


class ClientService:
    """
    Business Rules:
    1. company_id must reference an existing company
    2. Names: 2-20 chars of letters, space, hyphen, apostrophe
    3. email required and well formed; address/city/country <= 70 chars
    4. Updates are partial: None leaves a field unchanged
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_repo: ClientRepository,
        company_repo: CompanyRepository,
    ):
        self.uow = uow
        self.client_repo = client_repo
        self.company_repo = company_repo
        self.transaction = TransactionScope(uow)

    async def create(self, command: CreateClientCommandDTO) -> Result[ClientResponseDTO]:
        return await self.transaction.run("create_client", self._create, command)

    async def update(self, command: UpdateClientCommandDTO) -> Result[ClientResponseDTO]:
        return await self.transaction.run("update_client", self._update, command)

    async def delete(self, client_id: Optional[str]) -> Result[None]:
        return await self.transaction.run("delete_client", self._delete, client_id)

    async def find_by_id(self, client_id: Optional[str]) -> Result[ClientResponseDTO]:
        return await self.transaction.run("get_client", self._find_by_id, client_id, read_only=True)

    async def list_by_company(self, company_id: Optional[str]) -> Result[List[ClientResponseDTO]]:
        return await self.transaction.run(
            "list_clients", self._list_by_company, company_id, read_only=True
        )

    async def _create(self, command: CreateClientCommandDTO) -> ClientResponseDTO:
        logger.debug(f"Client creation started for companyId={command.company_id}")

        validation.require("company_id", command.company_id)
        validation.validate_person_name("first_name", command.first_name)
        validation.validate_person_name("last_name", command.last_name)
        validation.validate_email(command.email)
        validation.validate_address("address", command.address)
        validation.validate_address("city", command.city)
        validation.validate_address("country", command.country)
        validation.validate_phone_number(command.phone_number)

        company = await self.company_repo.get_by_id(command.company_id)
        if not company:
            raise EntityNotFoundError("Company", command.company_id)

        client = Client(
            company_id=company.id,
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
            address=command.address,
            city=command.city,
            country=command.country,
            phone_number=command.phone_number,
        )
        created_client = await self.client_repo.create(client)

        logger.info(f"Client created with id={created_client.id} for companyId={company.id}")
        return ClientResponseDTO.from_entity(created_client)

    async def _update(self, command: UpdateClientCommandDTO) -> ClientResponseDTO:
        validation.require("client_id", command.client_id)

        client = await self._resolve(command.client_id)
        client.apply_patch(
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
            address=command.address,
            city=command.city,
            country=command.country,
            phone_number=command.phone_number,
        )
        updated_client = await self.client_repo.update(client)

        logger.info(f"Client updated with id={updated_client.id}")
        return ClientResponseDTO.from_entity(updated_client)

    async def _delete(self, client_id: Optional[str]) -> None:
        validation.require("client_id", client_id)

        client = await self._resolve(client_id)
        await self.client_repo.delete(client)

        logger.info(f"Client deleted with id={client_id}")

    async def _find_by_id(self, client_id: Optional[str]) -> ClientResponseDTO:
        validation.require("client_id", client_id)
        return ClientResponseDTO.from_entity(await self._resolve(client_id))

    async def _list_by_company(self, company_id: Optional[str]) -> List[ClientResponseDTO]:
        validation.require("company_id", company_id)

        if not await self.company_repo.get_by_id(company_id):
            raise EntityNotFoundError("Company", company_id)

        clients = await self.client_repo.list_by_company_id(company_id)
        return [ClientResponseDTO.from_entity(client) for client in clients]

    async def _resolve(self, client_id: str) -> Client:
        client = await self.client_repo.get_by_id(client_id)
        if not client:
            raise EntityNotFoundError("Client", client_id)
        return client
