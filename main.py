"""
Command-line driver: run a traversal or an enumeration over a JSON graph.

Usage:
    python main.py graph.json --algorithm cycles
    python main.py graph.json --algorithm bfs --source 0 --forest
"""

import argparse
import json
import logging
import sys

from circuits import AllSimpleCycles, AllSimplePaths
from constants import DEBUG, LOG_FORMAT
from graphs import is_directed
from traversal import (
    BreadthFirstSearch,
    DepthFirstSearch,
    DepthFirstSearchEdges,
    LexicographicBreadthFirstSearch,
    LexicographicDepthFirstSearch,
    Traversal,
    topological_sort,
)
from utils.display import display_edges, display_map, display_order, display_paths
from utils.loader import load_graph

# Circuit enumeration recurses once per vertex on the open path
sys.setrecursionlimit(10**6)

logger = logging.getLogger(__name__)


def parse_vertex(text: str | None):
    """Reads a vertex as JSON (e.g. 3, "a"), or as a bare string."""
    if text is None:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def run(args: argparse.Namespace) -> None:
    graph = load_graph(args.graph)
    logger.info(f"Loaded {type(graph).__name__} with {graph.order()} vertices")

    source = parse_vertex(args.source)
    mode = Traversal.FOREST if args.forest else Traversal.TREE

    match args.algorithm:
        case "bfs":
            search = BreadthFirstSearch(graph, source, mode=mode)
            display_order("BFS", list(search))
            display_map("Distance", search.distance)
            display_map("Predecessor", search.predecessor)
        case "dfs":
            search = DepthFirstSearch(graph, source, mode=mode)
            display_order("DFS", list(search))
            display_map("Discovery time", search.discovery_time)
            display_map("Finish time", search.finish_time)
            display_map("Predecessor", search.predecessor)
        case "dfs-edges":
            search = DepthFirstSearchEdges(graph, source, mode=mode)
            display_edges("DFS edges", list(search))
        case "lexbfs":
            search = LexicographicBreadthFirstSearch(graph, source)
            display_order("LexBFS", list(search))
            display_map("Predecessor", search.predecessor)
        case "lexdfs":
            search = LexicographicDepthFirstSearch(graph)
            display_order("LexDFS", list(search))
            display_map("Predecessor", search.predecessor)
        case "topological":
            if not is_directed(graph):
                raise SystemExit("topological ordering requires a directed graph")
            display_order("Topological", topological_sort(graph))
        case "cycles":
            search = AllSimpleCycles(graph).run()
            display_paths("cycle(s)", search.cycles)
            display_map("Popularity", search.popularity)
        case "paths":
            target = parse_vertex(args.target)
            if source is None or target is None:
                raise SystemExit("--source and --target are required for paths")
            search = AllSimplePaths(graph, source, target).run()
            display_paths("simple path(s)", search.simple_paths)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Traverse graphs and enumerate circuits")
    parser.add_argument("graph", help="JSON graph file")
    parser.add_argument(
        "--algorithm",
        choices=[
            "bfs", "dfs", "dfs-edges", "lexbfs", "lexdfs", "topological", "cycles", "paths",
        ],
        default="cycles",
        help="Algorithm to run",
    )
    parser.add_argument("--source", help="Source vertex (JSON literal)")
    parser.add_argument("--target", help="Target vertex for paths (JSON literal)")
    parser.add_argument(
        "--forest", action="store_true", help="Visit every vertex (Forest mode)"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.debug or DEBUG:
        logging.getLogger().setLevel(logging.DEBUG)

    run(args)


if __name__ == "__main__":
    main()
