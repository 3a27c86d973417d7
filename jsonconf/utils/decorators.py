import functools
import logging

from jsonconf.components.errors import ConfigStoreError

logger = logging.getLogger(__name__)


def best_effort(fallback=None):
    """Turn ConfigStoreError into a logged warning and a fallback value.

    Wrapped methods belong to ConfigStore: the error is stored on
    ``self.last_error`` and re-raised when the store is strict.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except ConfigStoreError as e:
                self.last_error = e
                if self.strict:
                    raise
                logger.warning("Config store issue in %s: %s", func.__name__, e)
                return fallback
        return wrapper
    return decorator
