"""Store-error classification for the service boundary."""


import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from stockroom.core.exceptions import InternalError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Turn any store failure raised inside the block into :class:`InternalError`.

    Application exceptions (not found, validation, conflict) pass through.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Store error while %s", action)
        raise InternalError(f"Error {action}", detail=str(exc)) from exc
