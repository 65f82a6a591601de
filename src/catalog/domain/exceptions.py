"""Domain-level exceptions.

All catalog errors are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and map each kind to its
own exit status.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """The underlying store could not complete an operation.

    Raised by repository implementations, chained from the original
    I/O or database error. Never retried by the application layer.
    """
