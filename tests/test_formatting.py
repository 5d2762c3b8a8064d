from dijkstra_route.formatting import format_distance, format_path, format_result
from dijkstra_route.graph_model import Node


def test_format_path():
    assert format_path([Node("Praha"), Node("Hradec"), Node("Olomouc")]) == "Praha -> Hradec -> Olomouc"
    assert format_path(["Praha"]) == "Praha"


def test_format_distance():
    assert format_distance(256.0) == "256"
    assert format_distance(0) == "0"
    assert format_distance(12.5) == "12.5"


def test_format_result():
    text = format_result((Node("Praha"), Node("Hradec")), 100.0)
    assert text.splitlines() == ["Total distance: 100", "Path: Praha -> Hradec"]
