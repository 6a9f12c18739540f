"""Unique constraint translation

The storage schema is the authoritative guard for uniqueness. When a write
races past a service pre-check, the resulting IntegrityError is translated
into the same BusinessRuleError the pre-check would have raised.
"""

from contextlib import asynccontextmanager
from typing import Optional, Tuple
from sqlalchemy.exc import IntegrityError
from src.domain.errors import BusinessRuleError

# (markers found in the driver message, error code, message)
# Markers cover both the named constraint (PostgreSQL) and the
# table.column form reported by SQLite.
UNIQUE_CONSTRAINTS: Tuple[Tuple[Tuple[str, ...], str, str], ...] = (
    (
        ("uq_companies_org_num", "companies.org_num"),
        "ORG_NUM_EXISTS",
        "Company with organization number already exists",
    ),
    (
        ("uq_users_email", "users.email"),
        "EMAIL_ALREADY_EXISTS",
        "A user with this email already exists",
    ),
    (
        ("uq_invoices_number", "invoices.number"),
        "INVOICE_NUMBER_EXISTS",
        "Invoice number is already in use",
    ),
    (
        ("company_users_pkey", "company_users.user_id"),
        "USER_ALREADY_ASSOCIATED",
        "User is already associated with this company",
    ),
)


def translate_integrity_error(error: IntegrityError) -> Optional[BusinessRuleError]:
    """Map a unique violation to its BusinessRuleError, None if unknown"""
    detail = str(error.orig) if error.orig is not None else str(error)
    for markers, code, message in UNIQUE_CONSTRAINTS:
        if any(marker in detail for marker in markers):
            return BusinessRuleError(message, code)
    return None


@asynccontextmanager
async def constraint_guard():
    """Re-raise known unique violations as BusinessRuleError"""
    try:
        yield
    except IntegrityError as e:
        translated = translate_integrity_error(e)
        if translated is None:
            raise
        raise translated from e
