"""Serialization of fault payloads to plain dicts and JSON."""

import json
from dataclasses import asdict
from typing import Any, NoReturn

from faultkit.faults.exceptions import FaultDecodeError
from faultkit.faults.models import FaultData
from faultkit.logging.logger import Log


def encode_fault(data: FaultData) -> dict[str, object]:
    """Return the payload as a JSON-compatible dict keyed by field name."""
    return asdict(data)


def decode_fault(raw: Any) -> FaultData:
    """Validate a decoded JSON object and build a FaultData.

    Unknown keys are ignored.

    Raises:
        FaultDecodeError: on a missing field or a field of the wrong type.
    """
    if not isinstance(raw, dict):
        fail_decode("Fault payload must be an object")
    for field in ("code", "type", "message"):
        if field not in raw:
            fail_decode(f"Missing required fault field: {field}")
    code = raw["code"]
    # bool is an int subclass but never a valid code
    if isinstance(code, bool) or not isinstance(code, int):
        fail_decode(f"'code' must be an integer, got {code!r}")
    for field in ("type", "message"):
        if not isinstance(raw[field], str):
            fail_decode(f"'{field}' must be a string, got {raw[field]!r}")
    return FaultData(code=code, type=raw["type"], message=raw["message"])


def fault_to_json(data: FaultData) -> str:
    return json.dumps(encode_fault(data), ensure_ascii=False)


def fault_from_json(text: str | bytes) -> FaultData:
    """Parse a JSON document into a FaultData.

    Raises:
        FaultDecodeError: on malformed JSON or an invalid payload.
    """
    try:
        parsed = json.loads(text)
    # ValueError covers JSONDecodeError and UnicodeDecodeError from bytes input
    except ValueError as exc:
        Log.warning(f"Invalid fault JSON: {exc}")
        raise FaultDecodeError(f"Invalid fault JSON: {exc}") from exc
    return decode_fault(parsed)


def fail_decode(message: str) -> NoReturn:
    """Log a decode failure at WARNING and raise FaultDecodeError."""
    Log.warning(f"Fault decode failed: {message}")
    raise FaultDecodeError(message)
