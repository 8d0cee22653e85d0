# tests/app/test_build_and_run.py
import math

import pytest

from geo_astar.app.build import build, run_queries
from geo_astar.app.cli import format_result, main
from geo_astar.app.example import EXAMPLE_SCENARIO
from geo_astar.config.models import ScenarioModel
from geo_astar.domain.heuristics import ZeroHeuristic
from geo_astar.io.recorder import MemorySink, Recorder
from geo_astar.io.search_logging import SearchLogging
from geo_astar.search.hooks import NoopHooks


def test_build_runs():
    cfg = {
        "name": "test",
        "run_id": "t-1",
        "graph": {
            "locations": [
                {"name": "home", "lat": 38.58, "lng": -121.49},
                {"name": "work", "lat": 38.56, "lng": -121.75},
                {"name": "gym", "lat": 38.54, "lng": -121.74},
            ],
            "edges": [
                {"source": "home", "target": "work", "weight": 30.0},
                {"source": "work", "target": "gym", "weight": 2.5},
            ],
        },
        "search": {"heuristic": {"kind": "zero"}},
        "queries": [
            {"start": "home", "goal": "gym"},
            {"start": "gym", "goal": "home"},
        ],
    }
    app = build(cfg, use_logging=False)
    assert isinstance(app.engine.heuristic, ZeroHeuristic)
    assert len(app.graph) == 3

    fwd, back = run_queries(app)
    assert (fwd.path, fwd.cost) == (["home", "work", "gym"], 32.5)
    assert (back.path, back.cost) == ([], math.inf)


def test_example_scenario():
    app = build(ScenarioModel.model_validate(EXAMPLE_SCENARIO), use_logging=False)
    (res,) = run_queries(app)
    assert (res.start, res.goal) == ("A", "D")
    assert res.path == ["A", "C", "D"]
    assert res.cost == pytest.approx(6898.06)


def test_logging_build_feeds_recorder():
    sink = MemorySink()
    app = build(EXAMPLE_SCENARIO, recorder=Recorder(sink))
    run_queries(app)
    (rec,) = sink.records
    assert rec.run_id == "example"
    assert rec.path == ["A", "C", "D"]


def test_format_result():
    assert format_result(["A", "C", "D"], 6898.06) == "Path: [A C D], Cost: 6898.06"
    assert format_result(["A"], 0.0) == "Path: [A], Cost: 0.00"
    assert format_result([], math.inf) == "Path: [], Cost: inf"


def test_main_prints_example(capsys):
    main()
    assert capsys.readouterr().out == "Path: [A C D], Cost: 6898.06\n"


def test_build_without_logging_uses_noop_hooks():
    quiet = build(EXAMPLE_SCENARIO, use_logging=False)
    assert type(quiet.engine._hooks) is NoopHooks

    loud = build(EXAMPLE_SCENARIO)
    assert isinstance(loud.engine._hooks, SearchLogging)
    assert loud.engine._hooks.run_id == "example"
