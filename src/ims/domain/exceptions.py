"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Lookups that miss (unknown id or barcode) are NOT exceptions at the
repository level; they come back as ``None`` / ``False`` and the
application handlers decide whether that is an error.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class DuplicateBarcodeError(ValidationError):
    """Another product already carries this barcode."""

    def __init__(self, barcode: str, existing_name: str) -> None:
        super().__init__(f"This barcode is already used by: {existing_name}")
        self.barcode = barcode
        self.existing_name = existing_name


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
