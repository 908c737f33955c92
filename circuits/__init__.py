"""
Circuit and path enumeration.

**Cycles** (cycles.py)
    Hawick & James backtracking over every vertex as a potential root.
    - AllCycles: elementary circuits, directed or undirected
    - AllSimpleCycles: same circuits plus per-vertex popularity

**Paths** (paths.py)
    - AllSimplePaths: every simple path between two vertices

Enumerations are eager through `run()`, and lazy when iterated directly.
"""

from .cycles import AllCycles, AllSimpleCycles
from .paths import AllSimplePaths

__all__ = [
    "AllCycles",
    "AllSimpleCycles",
    "AllSimplePaths",
]
