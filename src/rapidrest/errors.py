import collections.abc

__all__: collections.abc.Sequence[str] = ("InvalidRequestTypeError", "RapidRestError")


class RapidRestError(Exception):
    """Base type for all errors raised by rapidrest itself."""


# NOTE: Raised synchronously, before any hook fires or the transport is used.
class InvalidRequestTypeError(RapidRestError, ValueError):
    """A request type was used that is unknown or not in the allow-list."""
