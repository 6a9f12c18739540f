"""
Field validation rules.

Pure functions over primitive inputs. Every rule either returns normally or
raises ValidationError(field, message, code); nothing here touches
persistence or mutates its input.

Each field kind is an ordered list of Rule entries (predicate + message +
code). check() walks the list and raises on the first predicate that fails,
so presence rules are listed before format rules.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from .errors import ValidationError


EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?"
    r"(\.[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?)*\.[A-Za-z]{2,}$"
)
ORG_NUM_PATTERN = re.compile(r"^\d{6}-\d{4}$")
PHONE_PATTERN = re.compile(r"^\+?[0-9\s\-()]{7,20}$")
PERSON_NAME_PATTERN = re.compile(r"^[A-Za-z\s\-']+$")
INVOICE_NUMBER_PATTERN = re.compile(r"^INV-\d{4}-\d{4}$")

PASSWORD_MIN_LENGTH = 8
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 20
ADDRESS_MAX_LENGTH = 70
PRICE_SCALE = 2


class FieldKind(str, Enum):
    EMAIL = "email"
    PASSWORD = "password"
    ORG_NUM = "org_num"
    COMPANY_NAME = "company_name"
    PERSON_NAME = "person_name"
    PHONE_NUMBER = "phone_number"
    ADDRESS = "address"
    INVOICE_NUMBER = "invoice_number"
    ITEM_QUANTITY = "item_quantity"
    ITEM_UNIT_PRICE = "item_unit_price"


@dataclass(frozen=True)
class Rule:
    """One constraint: value is accepted when predicate(value) is true."""

    predicate: Callable[[Any], bool]
    code: str
    message: str

    def apply(self, field: str, value: Any) -> None:
        if not self.predicate(value):
            raise ValidationError(field, self.message.format(field=field), self.code)


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _matches(pattern: "re.Pattern[str]") -> Callable[[str], bool]:
    return lambda value: pattern.fullmatch(value) is not None


def _positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _positive_decimal(value: Any) -> bool:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return False
    return amount.is_finite() and amount > 0


def _within_price_scale(value: Any) -> bool:
    # Trailing zeros do not count: 1.500 is stored exactly as 1.50
    return Decimal(str(value)).normalize().as_tuple().exponent >= -PRICE_SCALE


RULES: Dict[FieldKind, List[Rule]] = {
    FieldKind.EMAIL: [
        Rule(_present, "EMAIL_REQUIRED", "Email cannot be null or empty"),
        Rule(_matches(EMAIL_PATTERN), "EMAIL_INVALID", "Invalid email format"),
    ],
    FieldKind.PASSWORD: [
        Rule(_present, "PASSWORD_REQUIRED", "Password cannot be null or empty"),
        Rule(
            lambda value: len(value) >= PASSWORD_MIN_LENGTH,
            "PASSWORD_TOO_SHORT",
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
        ),
    ],
    FieldKind.ORG_NUM: [
        Rule(_present, "ORG_NUM_REQUIRED", "Organization number cannot be null or empty"),
        Rule(
            _matches(ORG_NUM_PATTERN),
            "ORG_NUM_INVALID",
            "Invalid organization number format. Expected: 123456-7890",
        ),
    ],
    FieldKind.COMPANY_NAME: [
        Rule(_present, "COMPANY_NAME_REQUIRED", "Company name cannot be null or empty"),
        Rule(
            lambda value: len(value) >= NAME_MIN_LENGTH,
            "COMPANY_NAME_TOO_SHORT",
            f"Company name must be at least {NAME_MIN_LENGTH} characters",
        ),
        Rule(
            lambda value: len(value) <= NAME_MAX_LENGTH,
            "COMPANY_NAME_TOO_LONG",
            f"Company name cannot exceed {NAME_MAX_LENGTH} characters",
        ),
    ],
    FieldKind.PERSON_NAME: [
        Rule(_present, "NAME_REQUIRED", "{field} cannot be null or empty"),
        Rule(
            lambda value: len(value) >= NAME_MIN_LENGTH,
            "NAME_TOO_SHORT",
            "{field} must be at least %d characters" % NAME_MIN_LENGTH,
        ),
        Rule(
            lambda value: len(value) <= NAME_MAX_LENGTH,
            "NAME_TOO_LONG",
            "{field} cannot exceed %d characters" % NAME_MAX_LENGTH,
        ),
        Rule(_matches(PERSON_NAME_PATTERN), "NAME_INVALID_CHARS", "{field} contains invalid characters"),
    ],
    # Optional fields: blank values are accepted
    FieldKind.PHONE_NUMBER: [
        Rule(
            lambda value: _blank(value) or PHONE_PATTERN.fullmatch(value) is not None,
            "PHONE_INVALID",
            "Invalid phone number format",
        ),
    ],
    FieldKind.ADDRESS: [
        Rule(
            lambda value: _blank(value) or len(value) <= ADDRESS_MAX_LENGTH,
            "ADDRESS_TOO_LONG",
            "{field} cannot exceed %d characters" % ADDRESS_MAX_LENGTH,
        ),
    ],
    FieldKind.INVOICE_NUMBER: [
        Rule(_present, "INVOICE_NUMBER_REQUIRED", "Invoice number cannot be null or empty"),
        Rule(
            _matches(INVOICE_NUMBER_PATTERN),
            "INVOICE_NUMBER_INVALID",
            "Invoice number must be in format INV-YYYY-XXXX",
        ),
    ],
    FieldKind.ITEM_QUANTITY: [
        Rule(_positive_int, "INVOICE_ITEM_QUANTITY_INVALID", "Item quantity must be greater than 0"),
    ],
    FieldKind.ITEM_UNIT_PRICE: [
        Rule(_positive_decimal, "INVOICE_ITEM_PRICE_INVALID", "Item unit price must be greater than 0"),
        Rule(
            _within_price_scale,
            "INVOICE_ITEM_PRICE_INVALID",
            f"Item unit price cannot have more than {PRICE_SCALE} decimal places",
        ),
    ],
}


def check(kind: FieldKind, field: str, value: Any) -> None:
    """Run every rule registered for ``kind`` against ``value``."""
    for rule in RULES[kind]:
        rule.apply(field, value)


def _required_code(field: str) -> str:
    return f"{field.upper()}_REQUIRED"


def require(field: str, value: Any) -> None:
    """Fail with <FIELD>_REQUIRED when value is None."""
    if value is None:
        raise ValidationError(field, f"{field} cannot be null", _required_code(field))


def require_not_blank(field: str, value: Optional[str]) -> None:
    """Fail with <FIELD>_REQUIRED when value is None or whitespace only."""
    if not _present(value):
        raise ValidationError(field, f"{field} cannot be null or empty", _required_code(field))


def validate_email(value: Optional[str], field: str = "email") -> None:
    check(FieldKind.EMAIL, field, value)


def validate_optional_email(value: Optional[str], field: str = "email") -> None:
    """Like validate_email, but blank values are accepted (optional contact fields)."""
    if _blank(value):
        return
    check(FieldKind.EMAIL, field, value)


def validate_password(value: Optional[str]) -> None:
    check(FieldKind.PASSWORD, "password", value)


def validate_org_num(value: Optional[str]) -> None:
    check(FieldKind.ORG_NUM, "org_num", value)


def validate_company_name(value: Optional[str]) -> None:
    check(FieldKind.COMPANY_NAME, "name", value)


def validate_person_name(field: str, value: Optional[str]) -> None:
    check(FieldKind.PERSON_NAME, field, value)


def validate_phone_number(value: Optional[str], field: str = "phone_number") -> None:
    check(FieldKind.PHONE_NUMBER, field, value)


def validate_address(field: str, value: Optional[str]) -> None:
    check(FieldKind.ADDRESS, field, value)


def validate_invoice_number(value: Optional[str]) -> None:
    check(FieldKind.INVOICE_NUMBER, "number", value)


def validate_item_quantity(value: Any) -> None:
    check(FieldKind.ITEM_QUANTITY, "quantity", value)


def validate_item_unit_price(value: Any) -> None:
    check(FieldKind.ITEM_UNIT_PRICE, "unit_price", value)


def mask_email(email: Optional[str]) -> str:
    """Mask an email address for log output: john@x.com -> jo***@x.com"""
    if not email or "@" not in email:
        return "***"
    local, domain = email.split("@", 1)
    return f"{local[:2]}***@{domain}"
