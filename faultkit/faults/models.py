from dataclasses import dataclass

DEFAULT_CODE = 499
DEFAULT_TYPE = "Unknown Error"
DEFAULT_MESSAGE = "There is an unknown error occurring."
HTTP_ERROR_TYPE = "HttpError"


@dataclass(frozen=True)
class FaultData:
    """Canonical error payload: an HTTP-like code, a category label and a message."""

    code: int
    type: str
    message: str
