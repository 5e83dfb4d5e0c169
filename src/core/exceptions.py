"""
Exception types shared across the library.

Scoring never raises for bad hotel data or unknown passion ids; the only
runtime failures come from the storage backends behind PassionProfile.
"""


class PassionMatchError(Exception):
    """Base class for errors raised by this library."""
    pass


class StorageError(PassionMatchError):
    """Raised when a key-value store backend cannot read or write."""
    pass
