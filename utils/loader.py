"""
Module used to import graphs from JSON edge lists

Expected layout:
    {"directed": true, "vertices": [0, 1, 2], "edges": [[0, 1], [1, 2]]}

"vertices" is optional and only needed for isolated vertices.
"""

import json
from typing import Any

from graphs import DiGraph, Graph


def data_to_graph(data: dict[str, Any]) -> DiGraph | Graph:
    assert isinstance(data.get("edges", []), list), "Error: 'edges' is not a list"

    edges = [tuple(edge) for edge in data.get("edges", [])]
    assert all(len(edge) == 2 for edge in edges), "Error: edges must be pairs"

    cls = DiGraph if data.get("directed", True) else Graph
    return cls(data.get("vertices", []), edges)


def load_graph(path: str) -> DiGraph | Graph:
    with open(path, "r") as file:
        data = json.load(file)
    return data_to_graph(data)
