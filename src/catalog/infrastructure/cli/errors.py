"""Translation of domain error kinds into CLI exit statuses.

Each kind gets its own status so scripts can tell a bad argument from a
missing product from a broken data file.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import click
from loguru import logger

from catalog.domain.exceptions import (
    EntityNotFoundError,
    StorageError,
    ValidationError,
)


# click reserves 1 (ClickException) and 2 (UsageError).
class InvalidInput(click.ClickException):
    exit_code = 3


class NotFound(click.ClickException):
    exit_code = 4


class StorageUnavailable(click.ClickException):
    exit_code = 5


@contextmanager
def domain_errors() -> Iterator[None]:
    """Re-raise domain exceptions as the matching ClickException."""
    try:
        yield
    except ValidationError as exc:
        raise InvalidInput(str(exc)) from exc
    except EntityNotFoundError as exc:
        raise NotFound(str(exc)) from exc
    except StorageError as exc:
        logger.error("Storage failure: {}", exc)
        raise StorageUnavailable(str(exc)) from exc
