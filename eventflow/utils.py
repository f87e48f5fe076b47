# SPDX-License-Identifier: Apache-2.0
"""Utility helpers for the eventflow runtime."""
from __future__ import annotations

import importlib
from typing import Any


def resolve_callable(qualname: str) -> Any:
    """Resolve dotted path to a callable.

    Supports both forms:
    - `package.module.function`
    - `package.module:function`
    """
    if ":" in qualname:
        module_name, func_name = qualname.split(":", 1)
    else:
        module_name, _, func_name = qualname.rpartition(".")
    if not module_name or not func_name:
        raise ValueError(f"callable path '{qualname}' must name a module and an attribute")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, func_name)
    except AttributeError as exc:
        raise AttributeError(f"callable '{qualname}' not found in module '{module_name}'") from exc
