"""Exception taxonomy for the graph engine.

Every error is raised at the point of violation and never retried. The
builtin bases let callers that only know Python's own exception types
(ValueError, IndexError) keep working.
"""


class GraphError(Exception):
    """Base class for all graph engine failures."""


class InvalidConstructionError(GraphError, ValueError):
    """Raised for a negative size or a second matrix attached to one graph."""


class IndexOutOfRangeError(GraphError, IndexError):
    """Raised for a vertex index outside [0, size) or any access on a null graph."""


class InvariantViolationError(GraphError):
    """Raised when a simple-graph rule would break or internal state is corrupt."""


class PreconditionNotMetError(GraphError):
    """Raised when an algorithm is called on a graph it cannot handle."""
