"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

# Free-text labels that never change a result
_UNHASHED_FIELDS = ("description",)


def config_hash(config: Any) -> str:
    """Deterministic SHA-256 hash of a config object.

    Two runs with equal hashes read, solve and write a scheme the same way;
    the ``description`` label is left out.

    Args:
        config: Any config dataclass instance (or sub-config).

    Returns:
        First 16 hex characters of the SHA-256 hash.
    """
    d = asdict(config)
    for name in _UNHASHED_FIELDS:
        d.pop(name, None)
    serialized = json.dumps(d, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]
