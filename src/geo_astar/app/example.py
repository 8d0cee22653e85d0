# Four European/US cities; weights are road-ish distances in km.
EXAMPLE_SCENARIO = {
    "name": "four_cities",
    "run_id": "example",
    "graph": {
        "locations": [
            {"name": "A", "lat": 52.2297, "lng": 21.0122},  # Warsaw
            {"name": "B", "lat": 51.5074, "lng": -0.1278},  # London
            {"name": "C", "lat": 48.8566, "lng": 2.3522},  # Paris
            {"name": "D", "lat": 40.7128, "lng": -74.0060},  # New York
        ],
        "edges": [
            {"source": "A", "target": "B", "weight": 1448.79},
            {"source": "A", "target": "C", "weight": 1053.81},
            {"source": "B", "target": "C", "weight": 344.35},
            {"source": "B", "target": "D", "weight": 5573.07},
            {"source": "C", "target": "D", "weight": 5844.25},
        ],
    },
    "queries": [{"start": "A", "goal": "D"}],
}
