import pytest

from faultkit.faults.fault import FaultError
from faultkit.faults.models import FaultData


@pytest.fixture()
def not_found_data() -> FaultData:
    """The canonical 404 payload used across tests."""
    return FaultData(code=404, type="NotFound", message="missing")


@pytest.fixture()
def not_found_fault(not_found_data: FaultData) -> FaultError:
    return FaultError(not_found_data)


class DescribedFailure:
    """Non-exception failure value exposing only a description."""

    def __init__(self, description: str) -> None:
        self.description = description


@pytest.fixture()
def described_failure() -> DescribedFailure:
    return DescribedFailure("disk quota exceeded")
