"""Request parameter normalization.

Both helpers are pure: they build a new dict and never touch the input.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any


def _normalize_key(key: Any) -> str:
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


def _normalize_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return normalize_params(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_value(item) for item in value]
    return value


def normalize_params(params: Mapping[Any, Any] | None) -> dict[str, Any]:
    """Return a copy of ``params`` with string keys and plain values.

    Enum keys and values are replaced by their ``value``; nested mappings
    and list or tuple values are normalized recursively (sequences come
    back as lists). ``None`` yields an empty dict.
    """
    if not params:
        return {}
    return {_normalize_key(key): _normalize_value(value) for key, value in params.items()}


def filter_params(allowed: Iterable[str], params: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only the keys in ``allowed``.

    Unknown keys are dropped silently rather than rejected.
    """
    allowed_keys = set(allowed)
    return {key: value for key, value in params.items() if key in allowed_keys}
