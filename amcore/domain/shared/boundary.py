"""Error boundary that classifies collaborator failures."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from amcore.domain.shared.error import AMError, TechnicalError


@contextmanager
def technical_boundary(logger: logging.Logger, message: str, *args: object) -> Iterator[None]:
    """Let classified errors through and wrap anything else as TechnicalError.

    ``message`` is %-formatted with ``args`` for both the log record and the
    TechnicalError message. AMError subclasses (TechnicalError included) are
    re-raised untouched, so nesting boundaries never wraps twice.
    """
    try:
        yield
    except AMError:
        raise
    except Exception as exc:
        logger.error(message, *args, exc_info=exc)
        raise TechnicalError(message % args if args else message, cause=exc) from exc
