import matplotlib

matplotlib.use("Agg")

import pytest

from core.process import ProcessRecord
from core.registry import ProcessRegistry
from core.simulator import SchedulingSimulator


@pytest.fixture
def registry():
    return ProcessRegistry()


@pytest.fixture
def simulator():
    return SchedulingSimulator()


@pytest.fixture
def textbook_records():
    return [
        ProcessRecord("P1", 5, 0),
        ProcessRecord("P2", 3, 1),
        ProcessRecord("P3", 8, 2),
    ]


@pytest.fixture
def textbook_simulator(simulator):
    simulator.add("P1", 5, 0)
    simulator.add("P2", 3, 1)
    simulator.add("P3", 8, 2)
    return simulator
