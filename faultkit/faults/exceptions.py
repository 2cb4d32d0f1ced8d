class FaultKitError(Exception):
    """Base exception for all faultkit library failures."""


class FaultDecodeError(FaultKitError):
    """Raised when serialized fault data cannot be decoded."""
