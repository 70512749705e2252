"""
Domain-specific errors for the promotion bounded context.

Every error carries an explicit ErrorKind; the interface layer picks the
HTTP status from it with a single switch.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(Enum):
    """Classification of a domain error, inspected at the HTTP boundary."""

    NOT_FOUND = "not_found"
    INVALID = "invalid"
    INTERNAL = "internal"


class PromotionDomainError(Exception):
    """Base error for all promotion domain errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NotFoundError(PromotionDomainError):
    """Raised when a requested resource does not exist."""

    kind = ErrorKind.NOT_FOUND


class PromotionNotFoundError(NotFoundError):
    """Raised when no promotion matches the given promotion ID."""

    def __init__(self, promotion_id: str) -> None:
        super().__init__(f"Promotion Not Found: {promotion_id}")
        self.promotion_id = promotion_id


class InvalidPromotionError(PromotionDomainError):
    """Raised when promotion input cannot be accepted."""

    kind = ErrorKind.INVALID
    default_message = "Invalid promotion data"

    def __init__(self, message: str = default_message) -> None:
        super().__init__(message)


class PromotionOperationError(PromotionDomainError):
    """Raised when a promotion operation fails for a non-domain reason.

    The message is the client-facing, operation-level text. The underlying
    exception is kept as ``__cause__``.
    """

    kind = ErrorKind.INTERNAL
