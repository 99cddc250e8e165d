"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_PURCHASE = "INVALID_PURCHASE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase request breaks the ticket purchase rules.

    Both the ticket limit and the accompanying adult rule map to this error.
    """

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PURCHASE,
            message="Invalid ticket purchase request.",
        )
