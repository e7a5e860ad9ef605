"""Deleting sequence service over XML graph text."""

from metrograph.service.provider import (
    GraphService,
    get_default_service,
    get_new_service,
)
from metrograph.service.types import SequenceResult

__all__ = [
    "GraphService",
    "SequenceResult",
    "get_default_service",
    "get_new_service",
]
