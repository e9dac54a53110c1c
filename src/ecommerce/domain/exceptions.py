"""Domain-level exceptions.

Every failure the core can report is a subclass of DomainException so the
transport layer (currently the CLI) can catch them uniformly and translate
them into its own vocabulary.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input or a business rule was rejected."""


class EntityNotFoundError(DomainException):
    """A referenced entity does not exist."""

    def __init__(self, entity: str, entity_id: object) -> None:
        super().__init__(f"{entity} not found with id: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class StorageError(DomainException):
    """The persistence layer could not read or durably write its data."""
