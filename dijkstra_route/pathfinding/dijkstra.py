from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Set, Tuple, Union

from dijkstra_route.errors import UnknownNodeError, UnreachableError
from dijkstra_route.graph_model import Graph, Node, NodeLike, as_node

_LOGGER = logging.getLogger(__name__)


class ShortestPath(NamedTuple):
    path: Tuple[Node, ...]
    total_distance: float


@dataclass(frozen=True)
class SourceVisit:
    """Metadata of the start node: no predecessor, distance 0."""

    total_distance: float = 0.0


@dataclass(frozen=True)
class Discovered:
    reached_from: Node
    total_distance: float


# a node with no entry in the metadata mapping is still unvisited
VisitMetadata = Union[SourceVisit, Discovered]


def find_shortest_path(source: NodeLike, target: NodeLike, graph: Graph) -> ShortestPath:
    """Run Dijkstra from source and stop once target is finalized.

    Raises UnknownNodeError if either endpoint is not in the graph and
    UnreachableError if no path connects them.
    """
    src, dst = as_node(source), as_node(target)
    for node in (src, dst):
        if node not in graph:
            raise UnknownNodeError(node.name)

    visited: Set[Node] = set()
    metadata: Dict[Node, VisitMetadata] = {src: SourceVisit()}

    # initialize min heap, the counter keeps Nodes out of comparisons
    counter = itertools.count()
    pq: List[Tuple[float, int, Node]] = [(0.0, next(counter), src)]

    while pq:
        _, _, node = heapq.heappop(pq)

        # skip outdated elements
        if node in visited:
            continue
        visited.add(node)
        settled = metadata[node].total_distance
        _LOGGER.debug("Finalized %s at distance %s", node, settled)

        if node == dst or len(visited) == graph.total_node_count:
            break

        for edge in graph.edges_from(node):
            neighbor = edge.target
            if neighbor in visited:
                continue
            new_dist = settled + edge.weight
            current = metadata.get(neighbor)
            if current is None or new_dist < current.total_distance:  # dv > du + w
                metadata[neighbor] = Discovered(reached_from=node, total_distance=new_dist)
                heapq.heappush(pq, (new_dist, next(counter), neighbor))
                _LOGGER.debug("Relaxed %s -> %s to %s", node, neighbor, new_dist)

    if dst not in visited:
        raise UnreachableError(src.name, dst.name)

    path = _reconstruct_path(dst, metadata)
    total_distance = metadata[dst].total_distance
    _LOGGER.info("Shortest path %s -> %s: %d hops, distance %s", src, dst, len(path) - 1, total_distance)
    return ShortestPath(path, total_distance)


def _reconstruct_path(target: Node, metadata: Dict[Node, VisitMetadata]) -> Tuple[Node, ...]:
    path: List[Node] = []
    node = target
    while True:
        path.append(node)
        entry = metadata[node]
        if isinstance(entry, SourceVisit):
            break
        node = entry.reached_from
    path.reverse()
    return tuple(path)
