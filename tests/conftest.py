import os

# keep test runs from appending to the package telemetry log
os.environ.setdefault("PLANNER_TELEMETRY_ENABLED", "0")

import pytest

from decor_planner.defaults import default_rooms
from decor_planner.models import DesignConfiguration, RoomDescriptor


@pytest.fixture
def design():
    return DesignConfiguration()


@pytest.fixture
def kitchen():
    return RoomDescriptor(name="Kitchen", width=4, depth=4, height=3, center=(3, 1.5, -2))


@pytest.fixture
def entrance():
    return RoomDescriptor(name="Entrance", width=2, depth=2, height=3, center=(-6, 1.5, 3))


@pytest.fixture
def rooms():
    return default_rooms()
