from geo_astar.app.build import build, run_queries
from geo_astar.app.example import EXAMPLE_SCENARIO


def format_result(path: list[str], cost: float) -> str:
    return f"Path: [{' '.join(path)}], Cost: {cost:.2f}"


def main() -> None:
    app = build(EXAMPLE_SCENARIO, use_logging=False)
    for res in run_queries(app):
        print(format_result(res.path, res.cost))


if __name__ == "__main__":
    main()
