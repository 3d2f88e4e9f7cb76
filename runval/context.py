"""
Context manager for validation configuration (e.g., index paths).
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar

logger = logging.getLogger(__name__)

# Context variable for array/tuple index context in error messages
_index_paths: ContextVar[bool] = ContextVar("index_paths", default=False)


def index_paths_enabled() -> bool:
    """Check if array/tuple failures are currently wrapped with their index."""
    return _index_paths.get()


@contextmanager
def validation_context(*, index_paths: bool = False):
    """
    Context manager for validation configuration.

    Args:
        index_paths: If True, Array and Tuple wrap an element failure with its
                     position, the way Object wraps a field failure. By default
                     the element's error is passed up unchanged.

    Example:
        from runval import Array, Number, validation_context

        schema = Array(Number())

        schema.validate([1, 2, "3"]).error.message
        # "Invalid primitive. Expected number, but got string"

        with validation_context(index_paths=True):
            schema.validate([1, 2, "3"]).error.message
            # "Got invalid type for index 2: 'Invalid primitive. ...'"
    """
    token = _index_paths.set(index_paths)
    logger.debug("validation context entered (index_paths=%s)", index_paths)
    try:
        yield
    finally:
        _index_paths.reset(token)
