import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.app.config import AppConfig  # noqa: E402
from backend.app.services.algebra_service import GraphAlgebraService  # noqa: E402

DEMO_MATRIX = [
    [0, 1, 1],
    [1, 0, 1],
    [1, 1, 0],
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Load an adjacency matrix and print it with a few derived graphs.",
    )
    parser.add_argument(
        "matrix",
        nargs="?",
        type=Path,
        help="JSON file holding a square list of integer rows (default: a triangle)",
    )
    parser.add_argument(
        "--directed",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="treat the matrix as directed (default: GRAPHALGEBRA_GRAPH_DEFAULT_DIRECTED)",
    )
    return parser


def main() -> None:
    config = AppConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    logger = logging.getLogger("graphalgebra.run")

    args = build_parser().parse_args()

    matrix = DEMO_MATRIX
    if args.matrix is not None:
        matrix = json.loads(args.matrix.read_text())

    service = GraphAlgebraService(config=config.graphalgebra)
    graph = service.build_graph(matrix, args.directed)

    logger.info("graph:\n%s", service.render(graph))
    logger.info("negated:\n%s", service.render(service.unary("negate", graph)))
    logger.info("doubled:\n%s", service.render(service.binary("add", graph, graph)))
    logger.info("squared:\n%s", service.render(service.binary("multiply", graph, graph)))


if __name__ == "__main__":
    main()
