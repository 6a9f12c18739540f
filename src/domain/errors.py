"""Domain error taxonomy

Every rule violation raised inside the core is a DomainError. The
transaction scope turns them into Result errors after rolling back.
"""

from enum import Enum
from typing import Optional
from src.libs.result import Error


class ErrorKind(str, Enum):
    """Error categories"""
    VALIDATION = "VALIDATION"
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    BUSINESS_RULE = "BUSINESS_RULE"
    AUTHENTICATION = "AUTHENTICATION"
    UNEXPECTED = "UNEXPECTED"


class DomainError(Exception):
    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, code: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.field = field

    def to_error(self) -> Error:
        return Error(
            code=self.code,
            message=self.message,
            reason=self.kind.value,
            kind=self.kind.value,
            field=self.field,
        )


class ValidationError(DomainError):
    """Caller supplied input that fails a field-level rule"""

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, message: str, code: str):
        super().__init__(message, code, field=field)


class EntityNotFoundError(DomainError):
    """A referenced identifier does not resolve to a persisted entity"""

    kind = ErrorKind.ENTITY_NOT_FOUND

    def __init__(self, entity: str, identifier, code: Optional[str] = None):
        self.entity = entity
        self.identifier = identifier
        if code is None:
            code = f"{entity.upper()}_NOT_FOUND"
        super().__init__(f"{entity} not found with identifier: {identifier}", code)


class BusinessRuleError(DomainError):
    """A structurally valid request violates a cross-entity invariant"""

    kind = ErrorKind.BUSINESS_RULE

    def __init__(self, message: str, code: str):
        super().__init__(message, code)


class AuthenticationError(DomainError):
    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str = "Invalid email or password", code: str = "AUTHENTICATION_FAILED"):
        super().__init__(message, code)
