"""
Database utilities for connection error handling
"""
import functools
import logging
from typing import Callable, Any, TypeVar, cast, Awaitable

from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError

from .exceptions import TransientServiceError

logger = logging.getLogger(__name__)

# Define a type variable for the return type of the decorated function
T = TypeVar('T')

_CONNECTION_ERRORS = (
    "ConnectionError",
    "ConnectionDoesNotExistError",
    "ConnectionRefusedError",
    "InterfaceError",
    "TimeoutError",
)


def is_connection_error(exc: BaseException) -> bool:
    if isinstance(exc, OperationalError):
        return True
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return True
    error_name = type(exc).__name__
    return any(err in error_name for err in _CONNECTION_ERRORS)


def translate_db_errors(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """
    Decorator that turns storage failures into TransientServiceError.

    Operations are not retried: the caller sees a generic "try again" error
    and nothing from the failed call is committed. Integrity errors are
    translated too, since the only ones reachable from the service layer are
    lost append races on a goal's history.
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return await func(*args, **kwargs)
        except IntegrityError as e:
            logger.warning(f"Conflicting write in {func.__name__}: {str(e)}")
            raise TransientServiceError() from e
        except Exception as e:
            if is_connection_error(e):
                logger.error(f"Database connection error in {func.__name__}: {str(e)}")
                raise TransientServiceError() from e
            raise

    return cast(Callable[..., Awaitable[T]], wrapper)
