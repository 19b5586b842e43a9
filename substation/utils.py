from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Mapping

from .errors import CoercionError

Resolver = Callable[[Any], Any]


def normalize_name(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, Enum):
        return key.value if isinstance(key.value, str) else key.name
    raise CoercionError(code="INVALID_CONFIG", message=f"unsupported name type: {type(key).__name__}")


def normalize_keys(mapping: Any) -> dict[str, Any]:
    if not isinstance(mapping, Mapping):
        raise CoercionError(code="INVALID_CONFIG", message=f"expected a mapping, got {type(mapping).__name__}")
    normalized: dict[str, Any] = {}
    for key, value in mapping.items():
        name = normalize_name(key)
        if name in normalized:
            raise CoercionError(code="DUPLICATE_NAME", message=f"{key!r} duplicates the name {name!r}")
        normalized[name] = value
    return normalized


def coerce_callable(ref: Any, resolver: Resolver | None = None) -> Callable[..., Any]:
    if callable(ref):
        return ref
    if resolver is None:
        raise CoercionError(code="NOT_CALLABLE", message=f"not callable and no resolver given: {ref!r}")
    try:
        resolved = resolver(ref)
    except CoercionError:
        raise
    except Exception as e:
        raise CoercionError(code="NOT_CALLABLE", message=f"cannot resolve {ref!r}: {e}") from e
    if not callable(resolved):
        raise CoercionError(code="NOT_CALLABLE", message=f"{ref!r} resolved to a non-callable {type(resolved).__name__}")
    return resolved
