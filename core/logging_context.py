"""
Request-scoped logging context.

The observability middleware stores the correlation id of the current request
here; the JSON log formatter reads it back for every record.
"""

from contextvars import ContextVar
from typing import Optional

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Return the correlation id of the request being served, if any."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: Optional[str]):
    """
    Bind a correlation id to the current context.

    Returns:
        Token that can be passed to reset_correlation_id()
    """
    return _correlation_id.set(correlation_id)


def reset_correlation_id(token) -> None:
    """Restore the correlation id that was active before set_correlation_id()."""
    _correlation_id.reset(token)
