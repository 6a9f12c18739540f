"""Unit tests for unique-constraint translation"""

import pytest
from sqlalchemy.exc import IntegrityError
from src.adapter.repositories.constraints import constraint_guard, translate_integrity_error
from src.domain.errors import BusinessRuleError


def integrity_error(detail: str) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, Exception(detail))


class TestTranslateIntegrityError:
    @pytest.mark.parametrize(
        "detail, code",
        [
            ("UNIQUE constraint failed: companies.org_num", "ORG_NUM_EXISTS"),
            ('duplicate key value violates unique constraint "uq_companies_org_num"', "ORG_NUM_EXISTS"),
            ("UNIQUE constraint failed: users.email", "EMAIL_ALREADY_EXISTS"),
            ("UNIQUE constraint failed: invoices.number", "INVOICE_NUMBER_EXISTS"),
            (
                "UNIQUE constraint failed: company_users.user_id, company_users.company_id",
                "USER_ALREADY_ASSOCIATED",
            ),
        ],
    )
    def test_known_constraints(self, detail, code):
        translated = translate_integrity_error(integrity_error(detail))

        assert isinstance(translated, BusinessRuleError)
        assert translated.code == code

    def test_unknown_constraint(self):
        assert translate_integrity_error(integrity_error("NOT NULL constraint failed: clients.email")) is None


@pytest.mark.asyncio
class TestConstraintGuard:
    async def test_known_violation_reraised_as_business_rule(self):
        with pytest.raises(BusinessRuleError) as exc_info:
            async with constraint_guard():
                raise integrity_error("UNIQUE constraint failed: invoices.number")

        assert exc_info.value.code == "INVOICE_NUMBER_EXISTS"

    async def test_unknown_violation_propagates(self):
        with pytest.raises(IntegrityError):
            async with constraint_guard():
                raise integrity_error("FOREIGN KEY constraint failed")
