"""
Textual reports of search and enumeration results.
"""

from collections.abc import Iterable, Mapping, Sequence

from localtypes import V


def format_path(path: Sequence[V]) -> str:
    return " -> ".join(str(x) for x in path)


def display_order(name: str, order: Sequence[V]):
    print(f"{name} visit order: {', '.join(str(x) for x in order)}")


def display_map(name: str, mapping: Mapping[V, object]):
    print(f"{name}:")
    for key in sorted(mapping):
        print(f"  {key}: {mapping[key]}")


def display_paths(name: str, paths: Iterable[Sequence[V]]):
    paths = list(paths)
    print(f"{len(paths)} {name}")
    for i, path in enumerate(paths):
        print(f"  n°{i}: {format_path(path)}")


def display_edges(name: str, edges: Iterable[tuple[object, V, V]]):
    print(f"{name}:")
    for kind, x, y in edges:
        print(f"  {x} -> {y} ({kind.value})")
