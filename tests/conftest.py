import pytest

from L3_world import OccupancyGrid
from L5_decision import NavigationParameters, PotentialFieldNavigator


@pytest.fixture
def empty_grid():
    """Grid 80x60 without obstacles."""
    return OccupancyGrid(80, 60)


@pytest.fixture
def navigator():
    """Navigator with the default coefficients."""
    return PotentialFieldNavigator(NavigationParameters())
