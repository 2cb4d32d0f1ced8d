from faultkit.bootstrap import configure
from faultkit.faults import (
    Describable,
    Failure,
    FaultData,
    FaultDecodeError,
    FaultError,
    FaultKitError,
    Result,
    Success,
    as_standard_error,
    capture,
    from_http_error,
    map_to_standard_error,
)

__all__ = [
    "Describable",
    "Failure",
    "FaultData",
    "FaultDecodeError",
    "FaultError",
    "FaultKitError",
    "Result",
    "Success",
    "as_standard_error",
    "capture",
    "configure",
    "from_http_error",
    "map_to_standard_error",
]
