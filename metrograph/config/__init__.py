"""Run configuration with frozen, hashable, serializable dataclasses."""

from metrograph.config.settings import (
    InputConfig,
    MetroConfig,
    OutputConfig,
    SolverConfig,
)
from metrograph.config.defaults import DEFAULT_CONFIG
from metrograph.config.hashing import config_hash
from metrograph.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "InputConfig",
    "MetroConfig",
    "OutputConfig",
    "SolverConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
]
