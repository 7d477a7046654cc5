"""Errors raised by storefront infrastructure.

Domain validation failures use ``protean.exceptions.ValidationError``; this
module only holds the failures that come from outside the domain model.
"""


class PersistenceError(Exception):
    """The blob store could not read or write a snapshot."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key
