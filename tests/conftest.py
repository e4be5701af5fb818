"""
Shared fixtures for the tracker tests.
"""

import pytest

from clash_arena.lobby.models import build_lobby
from clash_arena.lobby.store import LobbyStore
from tests.helpers import FIXED_TIME, RecordingGateway


@pytest.fixture
def lobby():
    return build_lobby("Friday Scrims", team_count=3, now=FIXED_TIME)


@pytest.fixture
def full_lobby():
    return build_lobby("Grand Finals", now=FIXED_TIME)


@pytest.fixture
def gateway():
    return RecordingGateway()


@pytest.fixture
def store(gateway):
    return LobbyStore(gateway=gateway)
