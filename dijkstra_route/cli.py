"""Command line entry point: shortest road route between two cities."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dijkstra_route import config
from dijkstra_route.csv_loader import load_graph_csv
from dijkstra_route.errors import InvalidEdgeError, NodeNotFoundError
from dijkstra_route.formatting import format_result
from dijkstra_route.pathfinding.dijkstra import find_shortest_path

_LOGGER = logging.getLogger(__name__)

EXIT_NOT_FOUND = 1
EXIT_INVALID_INPUT = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find the shortest route between two nodes of a from,to,distance table."
    )
    parser.add_argument("source", help="Start node name, e.g. Praha.")
    parser.add_argument("target", help="Destination node name, e.g. Olomouc.")
    parser.add_argument(
        "--graph",
        type=Path,
        default=config.DEFAULT_GRAPH_FILE,
        help="CSV file with a header row and from,to,distance rows.",
    )
    parser.add_argument(
        "--one-way",
        action="store_true",
        help="Treat every row as a single directed edge instead of a two-way road.",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format=config.LOG_FORMAT,
    )

    try:
        graph = load_graph_csv(args.graph, bidirectional=not args.one_way)
        path, total_distance = find_shortest_path(args.source, args.target, graph)
    except (InvalidEdgeError, FileNotFoundError) as exc:
        _LOGGER.debug("Cannot load %s", args.graph, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except NodeNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_NOT_FOUND

    print(format_result(path, total_distance))
    return 0


if __name__ == "__main__":
    sys.exit(main())
