import pytest

from .utils import FakeBus, SleepRecorder


@pytest.fixture
def bus() -> FakeBus:
    return FakeBus({0x0C: 1000, 0x0E: 250})


@pytest.fixture
def sleeper(bus: FakeBus) -> SleepRecorder:
    return SleepRecorder(bus)
