from __future__ import annotations

"""
Rotation Policy Persistence.

Loads rotation policies from JSON documents so operators can keep the
rotation settings of a deployment next to its other configuration files.
"""

import json
import logging
import os
from dataclasses import asdict, fields
from typing import Any, Dict

from rotalog.domain.settings import RotationPolicy
from rotalog.errors import PolicyFileError

logger = logging.getLogger(__name__)

_POLICY_FIELDS = tuple(f.name for f in fields(RotationPolicy))


def policy_from_dict(data: Dict[str, Any]) -> RotationPolicy:
    """
    Build a policy from a mapping, using defaults for absent keys.

    Args:
        data: Mapping keyed by RotationPolicy field names.

    Returns:
        RotationPolicy: The resulting policy.

    Raises:
        PolicyFileError: If a value has the wrong type.
    """
    unknown = sorted(set(data) - set(_POLICY_FIELDS))
    if unknown:
        logger.warning(f"Ignoring unknown rotation policy keys: {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for name in ("clear_on_startup", "enable_rotation"):
        if name in data:
            if not isinstance(data[name], bool):
                raise PolicyFileError(f"'{name}' must be a boolean")
            values[name] = data[name]

    for name in ("max_file_size", "max_backup_count"):
        if name in data:
            raw = data[name]
            if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
                raise PolicyFileError(f"'{name}' must be a non-negative integer")
            values[name] = raw

    return RotationPolicy(**values)


def policy_to_dict(policy: RotationPolicy) -> Dict[str, Any]:
    """Serialize a policy into a JSON-compatible dictionary."""
    return asdict(policy)


def load_policy(path: str) -> RotationPolicy:
    """
    Read a rotation policy from a JSON file.

    Args:
        path: Location of a JSON object holding policy fields.

    Returns:
        RotationPolicy: The parsed policy.

    Raises:
        PolicyFileError: If the file is missing, unreadable or malformed.
    """
    if not os.path.exists(path):
        raise PolicyFileError(f"Policy file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise PolicyFileError(f"Cannot read policy file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise PolicyFileError(f"Policy file '{path}' must contain a JSON object")

    policy = policy_from_dict(data)
    logger.debug(f"Loaded rotation policy from {path}: {policy}")
    return policy
