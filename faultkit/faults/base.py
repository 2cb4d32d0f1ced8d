from typing import Protocol, runtime_checkable


@runtime_checkable
class Describable(Protocol):
    """Any failure value that carries a human-readable description."""

    @property
    def description(self) -> str: ...


def describe(error: object) -> str:
    """Return the description of a failure value, verbatim.

    Values exposing a string ``description`` use it; everything else (notably
    plain exceptions, or a ``description`` that is None) falls back to
    ``str(error)``.
    """
    if isinstance(error, Describable) and isinstance(error.description, str):
        return error.description
    return str(error)
