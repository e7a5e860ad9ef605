"""Reading and writing MetroConfig as JSON run files.

A run file only needs the keys it changes, e.g.
``{"solver": {"verify_sequence": true}}``. Anything else keeps its default.
"""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from metrograph.config.settings import MetroConfig

# A misspelled key in a run file is an error, not a silent default
_DACITE_CONFIG = DaciteConfig(check_types=True, strict=True)


def config_to_json(config: MetroConfig) -> str:
    """Write every setting, so the file records the run in full."""
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> MetroConfig:
    """Build a MetroConfig from run file text.

    Raises:
        json.JSONDecodeError: If the text is not JSON.
        dacite.DaciteError: For unknown keys or values of the wrong type.
        ValueError: If MetroConfig rejects the combined settings.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: MetroConfig) -> dict[str, Any]:
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> MetroConfig:
    """Nested sections map onto InputConfig, SolverConfig and OutputConfig."""
    return from_dict(data_class=MetroConfig, data=d, config=_DACITE_CONFIG)
