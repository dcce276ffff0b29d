"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    def __init__(self, entity: str) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity


class AlreadyExistsError(DomainException):
    """Creating the entity would break a uniqueness rule."""

    def __init__(self, entity: str) -> None:
        super().__init__(f"{entity} already exists")
        self.entity = entity


class InvalidStateError(DomainException):
    """A derived value was requested from a collection that is empty."""
