from __future__ import annotations

from typing import Sequence

from dijkstra_route.config import PATH_SEPARATOR
from dijkstra_route.graph_model import NodeLike


def format_path(path: Sequence[NodeLike]) -> str:
    # n1 -> n2 -> n3
    return PATH_SEPARATOR.join(str(node) for node in path)


def format_distance(distance: float) -> str:
    if float(distance).is_integer():
        return str(int(distance))
    return repr(float(distance))


def format_result(path: Sequence[NodeLike], total_distance: float) -> str:
    return f"Total distance: {format_distance(total_distance)}\nPath: {format_path(path)}"
