"""
encrypt_storage.storage._core.value_codec
=========================================
Turns application values into the string that gets encrypted, and back.

encode:
  dict / list / tuple / None / bool / int / float → compact JSON
    (nested dates and times become ISO-8601 strings, other
     non-JSON objects their str())
  str                                             → unchanged
  anything else                                   → str(value)

decode:
  state-management mode → raw string unchanged
  otherwise             → json.loads(raw), or raw itself if it is not JSON

A payload that is not valid JSON is a legitimate opaque string, so
decode never raises.
"""

from __future__ import annotations

import json
from typing import Any


_JSON_TYPES = (dict, list, tuple, bool, int, float)


def _json_default(obj: Any) -> str:
    if hasattr(obj, "isoformat"):
        return obj.isoformat()
    return str(obj)


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_json_default)


def encode(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, _JSON_TYPES):
        return _dumps(value)
    return str(value)


def decode(raw: str, state_management_use: bool = False) -> Any:
    if state_management_use:
        return raw
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def to_json(value: Any) -> str:
    """JSON serialization used by encrypt_value(), same rules as encode() for containers."""
    return _dumps(value)


def from_json(raw: str) -> Any:
    """Strict JSON parse used by decrypt_value(). Raises ValueError on bad input."""
    return json.loads(raw)
