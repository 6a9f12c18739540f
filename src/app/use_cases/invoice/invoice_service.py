"""Invoice Service

The invoice is an aggregate root: it is created, updated and deleted
together with its items in a single unit of work.
"""

import logging
from typing import List, Optional
from src.libs.result import Result
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.transaction import TransactionScope
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.company_repository import CompanyRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain import validation
from src.domain.errors import BusinessRuleError, EntityNotFoundError, ValidationError
from src.domain.invoice import Invoice, InvoiceStatus
from .dtos import (
    CreateInvoiceCommandDTO,
    InvoiceItemCommandDTO,
    InvoiceResponseDTO,
    UpdateInvoiceCommandDTO,
)

logger = logging.getLogger(__name__)


def _items_required() -> ValidationError:
    return ValidationError("items", "Invoice must contain at least one item", "INVOICE_ITEMS_REQUIRED")


class InvoiceService:
    """
    Business Rules:
    1. Invoice number is well formed (INV-YYYY-XXXX) and globally unique
    2. Company and client must exist, and the client must belong to the company
    3. At least one item; every item has quantity > 0 and unit_price > 0
    4. amount is recomputed from items on every item change
    5. Status is set directly unless strict transitions are enabled
    6. Invoice and items are written atomically
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        company_repo: CompanyRepository,
        client_repo: ClientRepository,
        strict_status_transitions: bool = False,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.company_repo = company_repo
        self.client_repo = client_repo
        self.strict_status_transitions = strict_status_transitions
        self.transaction = TransactionScope(uow)

    async def create(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Create an invoice with its initial items

        Flow:
        1. Validate company_id, client_id and invoice number
        2. Reject an invoice number already in use
        3. Resolve company and client
        4. Require at least one item
        5. Build invoice (status=created), attach items, compute amount
        6. Persist invoice and items, commit
        """
        return await self.transaction.run("create_invoice", self._create, command)

    async def update(self, command: UpdateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """Apply due_date/status and optionally replace the whole item set"""
        return await self.transaction.run("update_invoice", self._update, command)

    async def update_status(
        self, invoice_id: Optional[str], new_status: Optional[InvoiceStatus]
    ) -> Result[InvoiceResponseDTO]:
        return await self.transaction.run("update_invoice_status", self._update_status, invoice_id, new_status)

    async def delete(self, invoice_id: Optional[str]) -> Result[None]:
        return await self.transaction.run("delete_invoice", self._delete, invoice_id)

    async def get_by_id(self, invoice_id: Optional[str]) -> Result[Optional[InvoiceResponseDTO]]:
        """Returns Return.ok(None) when the invoice does not exist"""
        return await self.transaction.run("get_invoice", self._get_by_id, invoice_id, read_only=True)

    async def list_by_company(self, company_id: Optional[str]) -> Result[List[InvoiceResponseDTO]]:
        return await self.transaction.run(
            "list_company_invoices", self._list_by_company, company_id, read_only=True
        )

    async def list_by_client(self, client_id: Optional[str]) -> Result[List[InvoiceResponseDTO]]:
        return await self.transaction.run(
            "list_client_invoices", self._list_by_client, client_id, read_only=True
        )

    async def _create(self, command: CreateInvoiceCommandDTO) -> InvoiceResponseDTO:
        logger.debug(f"Invoice creation started: number={command.number}, companyId={command.company_id}")

        # Step 1: Presence and format
        validation.require("company_id", command.company_id)
        validation.require("client_id", command.client_id)
        validation.validate_invoice_number(command.number)

        # Step 2: Uniqueness pre-check
        if await self.invoice_repo.exists_by_number(command.number):
            raise BusinessRuleError(
                f"Invoice number {command.number} is already in use", "INVOICE_NUMBER_EXISTS"
            )

        # Step 3: Referenced entities
        company = await self.company_repo.get_by_id(command.company_id)
        if not company:
            raise EntityNotFoundError("Company", command.company_id)

        client = await self.client_repo.get_by_id(command.client_id)
        if not client:
            raise EntityNotFoundError("Client", command.client_id)

        if client.company_id != company.id:
            raise BusinessRuleError(
                "Client does not belong to the invoicing company", "CLIENT_NOT_IN_COMPANY"
            )

        # Step 4: Items
        if not command.items:
            raise _items_required()

        # Step 5: Build aggregate
        invoice = Invoice(
            company_id=company.id,
            client_id=client.id,
            number=command.number,
            due_date=command.due_date,
            status=InvoiceStatus.CREATED,
        )
        invoice.replace_items(self._build_items(command.items))

        # Step 6: Persist invoice + items
        created_invoice = await self.invoice_repo.create(invoice)

        logger.info(
            f"Invoice {created_invoice.number} created with id={created_invoice.id}, "
            f"amount={created_invoice.amount}"
        )
        return InvoiceResponseDTO.from_entity(created_invoice)

    async def _update(self, command: UpdateInvoiceCommandDTO) -> InvoiceResponseDTO:
        validation.require("invoice_id", command.invoice_id)

        invoice = await self._resolve(command.invoice_id)

        if command.status is not None:
            invoice.change_status(command.status, strict=self.strict_status_transitions)

        if command.items is not None:
            if not command.items:
                raise _items_required()
            invoice.replace_items(self._build_items(command.items))

        if command.due_date is not None:
            invoice.due_date = command.due_date

        invoice.touch()
        updated_invoice = await self.invoice_repo.update(invoice)

        logger.info(f"Invoice updated with id={updated_invoice.id}, amount={updated_invoice.amount}")
        return InvoiceResponseDTO.from_entity(updated_invoice)

    async def _update_status(
        self, invoice_id: Optional[str], new_status: Optional[InvoiceStatus]
    ) -> InvoiceResponseDTO:
        validation.require("invoice_id", invoice_id)
        validation.require("status", new_status)

        try:
            target_status = InvoiceStatus(new_status)
        except ValueError:
            raise ValidationError("status", f"Unknown invoice status: {new_status}", "STATUS_INVALID")

        invoice = await self._resolve(invoice_id)
        previous_status = invoice.status
        invoice.change_status(target_status, strict=self.strict_status_transitions)
        updated_invoice = await self.invoice_repo.update(invoice)

        logger.info(
            f"Invoice {invoice_id} status changed: {previous_status.value} -> {updated_invoice.status.value}"
        )
        return InvoiceResponseDTO.from_entity(updated_invoice)

    async def _delete(self, invoice_id: Optional[str]) -> None:
        validation.require("invoice_id", invoice_id)

        invoice = await self._resolve(invoice_id)
        await self.invoice_repo.delete(invoice)

        logger.info(f"Invoice deleted with id={invoice_id}")

    async def _get_by_id(self, invoice_id: Optional[str]) -> Optional[InvoiceResponseDTO]:
        validation.require("invoice_id", invoice_id)

        invoice = await self.invoice_repo.get_by_id(invoice_id)
        if not invoice:
            return None
        return InvoiceResponseDTO.from_entity(invoice)

    async def _list_by_company(self, company_id: Optional[str]) -> List[InvoiceResponseDTO]:
        validation.require("company_id", company_id)
        invoices = await self.invoice_repo.list_by_company_id(company_id)
        return [InvoiceResponseDTO.from_entity(invoice) for invoice in invoices]

    async def _list_by_client(self, client_id: Optional[str]) -> List[InvoiceResponseDTO]:
        validation.require("client_id", client_id)
        invoices = await self.invoice_repo.list_by_client_id(client_id)
        return [InvoiceResponseDTO.from_entity(invoice) for invoice in invoices]

    async def _resolve(self, invoice_id: str) -> Invoice:
        invoice = await self.invoice_repo.get_by_id(invoice_id)
        if not invoice:
            raise EntityNotFoundError("Invoice", invoice_id)
        return invoice

    @staticmethod
    def _build_items(items: List[InvoiceItemCommandDTO]):
        return [item.to_entity() for item in items]
