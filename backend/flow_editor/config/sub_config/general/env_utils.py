"""
Environment helpers for config dataclasses.
"""

from __future__ import annotations

import os
from dataclasses import Field
from logging import getLogger
from typing import Any, Dict

logger = getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _coerce(raw: str, type_name: str) -> Any:
    if type_name == "bool":
        return raw.strip().lower() in _TRUE_VALUES
    if type_name == "int":
        return int(raw)
    if type_name == "float":
        return float(raw)
    return raw


def read_env_defaults(env_map: Dict[str, str], fields: Dict[str, Field]) -> Dict[str, Any]:
    """Read the environment variables named in ``env_map``.

    Values are coerced to the dataclass field's type. Unset variables
    are skipped so the dataclass default applies; unparsable ones are
    skipped with a warning.
    """
    values: Dict[str, Any] = {}
    for field_name, env_name in env_map.items():
        raw = os.environ.get(env_name)
        if raw is None or field_name not in fields:
            continue
        field_type = fields[field_name].type
        type_name = field_type if isinstance(field_type, str) else field_type.__name__
        try:
            values[field_name] = _coerce(raw, type_name)
        except ValueError:
            logger.warning(f"Ignoring invalid value for {env_name}: {raw!r}")
    return values
