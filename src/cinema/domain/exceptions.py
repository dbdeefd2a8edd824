"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from enum import Enum


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input could not be turned into a valid domain value."""


class PurchaseErrorCode(Enum):
    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    MISSING_TICKET_REQUEST = "MISSING_TICKET_REQUEST"
    INVALID_TICKET_QUANTITY = "INVALID_TICKET_QUANTITY"
    MAX_TICKETS_EXCEEDED = "MAX_TICKETS_EXCEEDED"
    MISSING_ADULT_TICKET = "MISSING_ADULT_TICKET"


class InvalidPurchaseError(DomainException):
    """A ticket purchase broke one of the purchase rules.

    ``code`` identifies the rule so callers can branch on it without
    parsing ``message``.
    """

    def __init__(self, code: PurchaseErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message
