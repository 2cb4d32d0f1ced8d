"""Normalization of arbitrary failures into FaultError."""

import httpx

from faultkit.faults.base import describe
from faultkit.faults.fault import FaultError
from faultkit.faults.models import DEFAULT_CODE, HTTP_ERROR_TYPE, FaultData
from faultkit.logging.logger import Log


def as_standard_error(error: object, code: int) -> FaultError:
    """Wrap any failure as an ``HttpError`` fault carrying its description.

    The source's own classification is discarded; the resulting type is
    always ``HttpError``.
    """
    fault = FaultError(FaultData(code=code, type=HTTP_ERROR_TYPE, message=describe(error)))
    Log.debug(f"Normalized {type(error).__name__} into {HTTP_ERROR_TYPE} fault (code {code})")
    return fault


def from_http_error(exc: httpx.HTTPError, code: int = DEFAULT_CODE) -> FaultError:
    """Normalize an httpx failure, taking the code from the response when there is one.

    Args:
        exc: Any httpx error. ``HTTPStatusError`` carries a response whose
            status code is used; transport errors and timeouts have none.
        code: Code used when the error carries no response.
    """
    if isinstance(exc, httpx.HTTPStatusError):
        code = exc.response.status_code
    return as_standard_error(exc, code)
