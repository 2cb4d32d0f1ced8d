from typing import Any

from faultkit.faults.codec import decode_fault, encode_fault, fail_decode
from faultkit.faults.models import (
    DEFAULT_CODE,
    DEFAULT_MESSAGE,
    DEFAULT_TYPE,
    FaultData,
)


class FaultError(Exception):
    """Raisable wrapper around a FaultData payload.

    The payload is only absent in the default-constructed state; instances
    built through ``create`` or the conversion helpers always carry one.
    Two FaultErrors are equal when their payloads are equal.
    """

    def __init__(self, data: FaultData | None = None) -> None:
        super().__init__()
        self.data = data

    @classmethod
    def create(
        cls,
        code: int = DEFAULT_CODE,
        type: str = DEFAULT_TYPE,
        message: str = DEFAULT_MESSAGE,
    ) -> "FaultError":
        """Build a FaultError whose payload is exactly ``FaultData(code, type, message)``.

        Args:
            code: HTTP-like error code.
            type: Error category label.
            message: Human-readable description.
        """
        return cls(FaultData(code=code, type=type, message=message))

    def to_dict(self) -> dict[str, object]:
        return {"data": encode_fault(self.data) if self.data is not None else None}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "FaultError":
        """Rebuild a FaultError from ``to_dict`` output.

        Raises:
            FaultDecodeError: if ``raw`` is not an object, or ``data`` is
                present but not a valid payload.
        """
        if not isinstance(raw, dict):
            fail_decode("Fault wrapper must be an object")
        payload = raw.get("data")
        if payload is None:
            return cls()
        if not isinstance(payload, dict):
            fail_decode("'data' must be an object or null")
        return cls(decode_fault(payload))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FaultError):
            return NotImplemented
        return self.data == other.data

    def __hash__(self) -> int:
        return hash(self.data)

    def __str__(self) -> str:
        return self.data.message if self.data is not None else ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(data={self.data!r})"
