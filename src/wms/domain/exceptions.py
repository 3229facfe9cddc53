"""Domain-level exceptions.

All ledger failures are expressed as subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested product, operation or user does not exist."""


class InsufficientStockError(ValidationError):
    """An outbound line asks for more than is on hand."""

    def __init__(
        self,
        product_id: str,
        product_name: str | None,
        requested: int,
        available: int,
    ) -> None:
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available
        label = product_name or f"unknown product '{product_id}'"
        super().__init__(
            f"Insufficient stock for {label} "
            f"(need {requested}, have {available} on hand)"
        )


class PersistenceUnavailableError(DomainException):
    """The ledger store could not be read or written."""


class LedgerInconsistencyError(PersistenceUnavailableError):
    """A write failed after the operation and products were already saved.

    There is no rollback: the operation is Done and quantities changed, but
    the movement history or audit trail is incomplete.
    """
