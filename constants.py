"""
Global constants used throughout the project
"""
import math

# Distance assigned to vertices unreachable from the declared BFS source.
# inf + 1 == inf, so distances derived from it saturate.
INFINITY = math.inf

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"

DEBUG = False
