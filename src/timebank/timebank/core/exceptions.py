class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ExtractionError(ValidationError):
    """Raised when a document cannot be turned into punch fields."""


class StorageError(DomainError):
    """Raised when a ledger document cannot be loaded or saved."""
