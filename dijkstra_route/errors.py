"""Exceptions raised while building graphs and searching for routes."""

from __future__ import annotations


class RouteError(Exception):
    """Base class for every error raised by dijkstra_route."""


class InvalidEdgeError(RouteError, ValueError):
    """Edge data is malformed, non-numeric, negative or not finite."""


class NodeNotFoundError(RouteError, LookupError):
    """A shortest path cannot be produced for the requested endpoints."""


class UnknownNodeError(NodeNotFoundError):
    def __init__(self, node: str) -> None:
        super().__init__(f"Node '{node}' does not exist in the graph.")
        self.node = node


class UnreachableError(NodeNotFoundError):
    def __init__(self, source: str, target: str) -> None:
        super().__init__(f"No path between '{source}' and '{target}'.")
        self.source = source
        self.target = target
