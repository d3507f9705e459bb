from __future__ import annotations


class NotFoundError(LookupError):
    """Unknown network or preset identifier; the message carries a hint."""


class CatalogError(RuntimeError):
    """The remote chain catalog could not be fetched or understood."""
