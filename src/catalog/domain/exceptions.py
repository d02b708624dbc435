"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule was violated or an input could not be parsed."""


class EntityNotFoundError(DomainException):
    """A requested product does not exist in the catalog."""
