"""Error taxonomy for the company record service."""

from typing import Optional


class CompanyServiceError(Exception):
    """Base class for every failure surfaced by the record service."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidArgument(CompanyServiceError):
    """Missing or malformed identifier, or an unparseable field value."""


class NotFound(CompanyServiceError):
    """The referenced record does not exist."""


class WriteFailed(CompanyServiceError):
    """The store rejected an insert, update or delete."""


class StoreUnavailable(CompanyServiceError):
    """The store could not be read."""
