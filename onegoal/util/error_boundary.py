"""Service boundary that turns library failures into ServiceErrors."""

from contextlib import contextmanager
from typing import Iterator, Type

from onegoal.exceptions import ServiceError, StoreWriteError
from onegoal.util.logger import get_logger

logger = get_logger(__name__)


@contextmanager
def error_boundary(message: str, error_cls: Type[ServiceError] = StoreWriteError) -> Iterator[None]:
    """Re-raise ServiceErrors untouched; wrap anything else with ``message``.

    The original exception is chained and kept on ``cause``.
    """
    try:
        yield
    except ServiceError:
        raise
    except Exception as e:
        logger.error(f"{message} Cause: {type(e).__name__}: {e}")
        raise error_cls(message, cause=e) from e
