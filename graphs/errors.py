"""
Errors raised on graph contract violations.
"""


class VertexError(ValueError):
    """Raised when a vertex is required but absent from the graph."""

    pass
