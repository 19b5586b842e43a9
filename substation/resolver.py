from __future__ import annotations

import importlib
from typing import Any


def import_resolver(reference: Any) -> Any:
    """Resolve ``"pkg.module:attr"`` or ``"pkg.module.attr"`` to the named object."""
    if not isinstance(reference, str) or not reference.strip():
        raise ValueError(f"reference must be a non-empty string: {reference!r}")
    if ":" in reference:
        module_name, _, attr_path = reference.partition(":")
    else:
        module_name, _, attr_path = reference.rpartition(".")
    if not module_name or not attr_path:
        raise ValueError(f"reference must name a module and an attribute: {reference!r}")
    obj: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)
    return obj
