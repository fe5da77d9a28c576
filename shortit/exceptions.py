"""
Exceptions raised by the shortener.

Storage backends wrap their driver errors in StoreError so the HTTP layer
only has to know about one failure type.
"""


class ShortItError(Exception):
    """Base class for all shortener errors"""


class StoreError(ShortItError):
    """A mapping store could not complete an operation (connect, write, read or decode)"""


class UnknownBackendError(ShortItError, ValueError):
    """A configured backend or strategy name is not supported"""
