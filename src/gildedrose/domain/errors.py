"""Domain error hierarchy.

All errors are raised synchronously at the point of violation and are
never retried internally. The service layer translates them into
:class:`~gildedrose.services.result.ServiceError` payloads.
"""

from __future__ import annotations


class GildedRoseError(Exception):
    """Base class for every domain error."""


class InvalidArgument(GildedRoseError, ValueError):
    """An absent item or collection was passed where one is required."""


class InvalidConstruction(InvalidArgument):
    """An item was built with a blank name or an out-of-range quality."""


class IndexOutOfRange(GildedRoseError, IndexError):
    """An item was requested by a position outside the catalog."""
