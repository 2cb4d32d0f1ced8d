from faultkit.faults.base import Describable, describe
from faultkit.faults.codec import decode_fault, encode_fault, fault_from_json, fault_to_json
from faultkit.faults.conversion import as_standard_error, from_http_error
from faultkit.faults.exceptions import FaultDecodeError, FaultKitError
from faultkit.faults.fault import FaultError
from faultkit.faults.models import FaultData
from faultkit.faults.result import Failure, Result, Success, capture, map_to_standard_error

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
    "decode_fault",
    "describe",
    "encode_fault",
    "fault_from_json",
    "fault_to_json",
    "from_http_error",
    "map_to_standard_error",
]
