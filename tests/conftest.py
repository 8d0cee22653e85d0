import pytest

from geo_astar.app.example import EXAMPLE_SCENARIO
from geo_astar.config.models import GraphModel
from geo_astar.domain.graph import LocationGraph


@pytest.fixture
def four_cities() -> LocationGraph:
    return LocationGraph.from_model(GraphModel.model_validate(EXAMPLE_SCENARIO["graph"]))
