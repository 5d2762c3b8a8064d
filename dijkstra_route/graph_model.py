from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union

import networkx as nx

from dijkstra_route.errors import InvalidEdgeError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Node:
    name: str

    def __str__(self) -> str:
        return self.name


NodeLike = Union[Node, str]


def as_node(value: NodeLike) -> Node:
    """Accept either a Node or a bare name."""
    if isinstance(value, Node):
        return value
    return Node(value)


def parse_weight(value: object) -> float:
    """Convert a distance field to a finite, non-negative float."""
    if isinstance(value, bool):
        raise InvalidEdgeError(f"Distance must be a number, got {value!r}.")
    try:
        weight = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidEdgeError(f"Distance must be a number, got {value!r}.") from exc
    if not math.isfinite(weight):
        raise InvalidEdgeError(f"Distance must be finite, got {value!r}.")
    if weight < 0:
        raise InvalidEdgeError(f"Negative distances are not supported, got {value!r}.")
    return weight


@dataclass(frozen=True)
class Edge:
    origin: Node
    target: Node
    weight: float

    def __post_init__(self) -> None:
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "weight", parse_weight(self.weight))


class Graph:
    """Immutable weighted directed graph with precomputed adjacency.

    An undirected road is stored as two opposing edges with equal weight.
    total_node_count is the number of distinct node names over all edges
    unless a larger bound is given explicitly.
    """

    def __init__(self, edges: Iterable[Edge], total_node_count: Optional[int] = None) -> None:
        self._edges: Tuple[Edge, ...] = tuple(edges)
        adjacency: Dict[Node, List[Edge]] = {}

        for edge in self._edges:
            if not isinstance(edge, Edge):
                raise InvalidEdgeError(f"Expected an Edge, got {edge!r}.")
            adjacency.setdefault(edge.origin, []).append(edge)
            adjacency.setdefault(edge.target, [])

        self._adjacency: Dict[Node, Tuple[Edge, ...]] = {
            node: tuple(outgoing) for node, outgoing in adjacency.items()
        }
        self._nodes: FrozenSet[Node] = frozenset(self._adjacency)

        if total_node_count is None:
            total_node_count = len(self._nodes)
        elif total_node_count < len(self._nodes):
            raise InvalidEdgeError(
                f"total_node_count={total_node_count} is smaller than the "
                f"{len(self._nodes)} distinct nodes in the edges."
            )
        self._total_node_count = total_node_count

    @classmethod
    def from_triples(
        cls,
        rows: Iterable[Sequence[object]],
        bidirectional: bool = True,
    ) -> "Graph":
        """Build a graph from (from_name, to_name, distance) rows.

        Every row is validated before the graph exists. With bidirectional
        set, each row becomes the pair from->to and to->from.
        """
        edges: List[Edge] = []
        for index, row in enumerate(rows):
            try:
                origin_name, target_name, distance = row  # type: ignore[misc]
            except (TypeError, ValueError) as exc:
                raise InvalidEdgeError(
                    f"Row {index}: expected 3 fields (from, to, distance), got {row!r}."
                ) from exc

            for name in (origin_name, target_name):
                if not isinstance(name, str) or not name.strip():
                    raise InvalidEdgeError(f"Row {index}: invalid node name {name!r}.")

            try:
                weight = parse_weight(distance)
            except InvalidEdgeError as exc:
                raise InvalidEdgeError(f"Row {index}: {exc}") from exc

            origin, target = Node(origin_name), Node(target_name)
            edges.append(Edge(origin, target, weight))
            if bidirectional:
                edges.append(Edge(target, origin, weight))

        graph = cls(edges)
        _LOGGER.debug(
            "Built graph with %d edges and %d nodes", len(graph.edges), graph.total_node_count
        )
        return graph

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def nodes(self) -> FrozenSet[Node]:
        return self._nodes

    @property
    def total_node_count(self) -> int:
        return self._total_node_count

    def edges_from(self, node: NodeLike) -> Tuple[Edge, ...]:
        return self._adjacency.get(as_node(node), ())

    def __contains__(self, node: object) -> bool:
        if not isinstance(node, (Node, str)):
            return False
        return as_node(node) in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"

    def path_cost(self, path: Sequence[NodeLike]) -> float:
        """Return the total cost of walking along the given node sequence."""
        if len(path) < 2:
            return 0.0

        total_cost = 0.0
        for u, v in zip(path[:-1], path[1:]):
            target = as_node(v)
            weights = [edge.weight for edge in self.edges_from(u) if edge.target == target]
            if not weights:
                raise InvalidEdgeError(f"Edge {u}-{v} not present in graph.")
            total_cost += min(weights)
        return total_cost

    def to_networkx(self) -> nx.DiGraph:
        """Export as a networkx DiGraph keyed by node name, weight attribute 'weight'."""
        G = nx.DiGraph()
        G.add_nodes_from(node.name for node in self._nodes)
        for edge in self._edges:
            u, v = edge.origin.name, edge.target.name
            # parallel edges collapse to the cheapest one
            if G.has_edge(u, v) and G[u][v]["weight"] <= edge.weight:
                continue
            G.add_edge(u, v, weight=edge.weight)
        return G
