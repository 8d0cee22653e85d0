# tests/domain/test_graph.py
import math

import pytest

from geo_astar.domain.graph import LocationGraph, UnknownLocationError


def test_add_location_and_lookup():
    g = LocationGraph()
    loc = g.add_location("A", 52.2297, 21.0122)
    assert g.location("A") is loc
    assert (loc.lat, loc.lng) == (52.2297, 21.0122)
    assert "A" in g and "Z" not in g
    assert len(g) == 1
    assert g.edges_from("A") == []


def test_readding_location_overwrites_and_resets_edges():
    g = LocationGraph()
    g.add_location("A", 0.0, 0.0)
    g.add_location("B", 1.0, 1.0)
    g.add_edge("A", "B", 5.0)
    g.add_location("A", 10.0, 10.0)
    assert g.location("A").lat == 10.0
    assert g.edges_from("A") == []
    assert len(g) == 2


def test_edges_keep_order_and_allow_parallel():
    g = LocationGraph()
    for n in "ABC":
        g.add_location(n, 0.0, 0.0)
    g.add_edge("A", "B", 3.0)
    g.add_edge("A", "C", 1.0)
    g.add_edge("A", "B", 2.0)
    assert [(e.target.name, e.weight) for e in g.edges_from("A")] == [
        ("B", 3.0),
        ("C", 1.0),
        ("B", 2.0),
    ]
    assert g.edge_count == 3
    assert g.cheapest_edge("A", "B").weight == 2.0
    assert g.cheapest_edge("B", "A") is None


def test_edge_target_is_the_registered_location():
    g = LocationGraph()
    g.add_location("A", 0.0, 0.0)
    b = g.add_location("B", 1.0, 2.0)
    e = g.add_edge("A", "B", 7.0)
    assert e.target is b


def test_unknown_names_raise():
    g = LocationGraph()
    g.add_location("A", 0.0, 0.0)
    with pytest.raises(UnknownLocationError) as exc:
        g.add_edge("A", "B", 1.0)
    assert exc.value.name == "B"
    assert "'B'" in str(exc.value)
    with pytest.raises(UnknownLocationError):
        g.add_edge("Z", "A", 1.0)
    with pytest.raises(KeyError):
        g.location("Z")
    with pytest.raises(UnknownLocationError):
        g.edges_from("Z")


@pytest.mark.parametrize("weight", [-1.0, math.inf, math.nan])
def test_bad_weights_rejected(weight):
    g = LocationGraph()
    g.add_location("A", 0.0, 0.0)
    g.add_location("B", 0.0, 0.0)
    with pytest.raises(ValueError):
        g.add_edge("A", "B", weight)


def test_bad_coordinates_rejected():
    g = LocationGraph()
    with pytest.raises(ValueError):
        g.add_location("A", 91.0, 0.0)
    with pytest.raises(ValueError):
        g.add_location("A", 0.0, -180.5)
    assert len(g) == 0


def test_walk_cost(four_cities):
    assert four_cities.walk_cost(["A", "C", "D"]) == pytest.approx(6898.06)
    assert four_cities.walk_cost(["B"]) == 0.0
    assert four_cities.walk_cost([]) == math.inf
    with pytest.raises(ValueError):
        four_cities.walk_cost(["D", "A"])
    with pytest.raises(UnknownLocationError):
        four_cities.walk_cost(["Q"])
