"""Two-variant result container and failure-channel mapping."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from faultkit.faults.conversion import as_standard_error
from faultkit.faults.fault import FaultError
from faultkit.faults.models import DEFAULT_CODE

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Result variant holding a success value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        return Success(fn(self.value))

    def map_error(self, fn: Callable[[Any], Any]) -> "Success[T]":
        return self


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Result variant holding a failure value."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> "Failure[E]":
        return self

    def map_error(self, fn: Callable[[E], F]) -> "Failure[F]":
        return Failure(fn(self.error))


Result = Success[T] | Failure[E]


def capture(fn: Callable[..., T], *args: Any, **kwargs: Any) -> "Result[T, Exception]":
    """Call ``fn`` and wrap its return value or raised exception in a Result."""
    try:
        return Success(fn(*args, **kwargs))
    except Exception as exc:
        return Failure(exc)


def map_to_standard_error(result: "Result[T, Any]") -> "Result[T, FaultError]":
    """Re-type the failure channel to FaultError; success values pass through untouched."""
    return result.map_error(lambda error: as_standard_error(error, DEFAULT_CODE))
