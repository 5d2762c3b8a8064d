"""Read a from,to,distance table into a Graph."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple, Union

import pandas as pd

from dijkstra_route.config import CSV_COLUMNS
from dijkstra_route.errors import InvalidEdgeError
from dijkstra_route.graph_model import Graph

_LOGGER = logging.getLogger(__name__)


def read_edge_rows(csv_path: Union[str, Path]) -> List[Tuple[str, str, str]]:
    """Return the data rows of the table as raw string triples.

    The first line is a header and is skipped. Numeric validation is left
    to Graph.from_triples.
    """
    # header=None: the header line fixes the field count, so a data row with
    # an extra field is a parser error instead of an implicit index column
    try:
        df = pd.read_csv(
            csv_path,
            header=None,
            dtype=str,
            skipinitialspace=True,
            keep_default_na=False,
            on_bad_lines="error",
        )
    except pd.errors.EmptyDataError as exc:
        raise InvalidEdgeError(f"{csv_path}: file is empty.") from exc
    except pd.errors.ParserError as exc:
        raise InvalidEdgeError(f"{csv_path}: {exc}") from exc

    if len(df.columns) != len(CSV_COLUMNS):
        raise InvalidEdgeError(
            f"{csv_path}: expected {len(CSV_COLUMNS)} columns "
            f"({', '.join(CSV_COLUMNS)}), got {len(df.columns)}."
        )

    rows = []
    # line 1 is the header
    for line_no, values in enumerate(df.iloc[1:].itertuples(index=False, name=None), start=2):
        if any(pd.isna(value) or not str(value).strip() for value in values):
            raise InvalidEdgeError(f"{csv_path}: line {line_no} has missing fields: {values!r}.")
        origin, target, distance = (str(value).strip() for value in values)
        rows.append((origin, target, distance))
    return rows


def load_graph_csv(csv_path: Union[str, Path], bidirectional: bool = True) -> Graph:
    """Load a road table, each row becoming a pair of opposing edges by default."""
    rows = read_edge_rows(csv_path)
    graph = Graph.from_triples(rows, bidirectional=bidirectional)
    _LOGGER.info(
        "Loaded %s: %d rows, %d edges, %d nodes",
        csv_path, len(rows), len(graph.edges), graph.total_node_count,
    )
    return graph
