# SPDX-License-Identifier: Apache-2.0
"""Action type that delegates to a function resolved from a dotted path."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from eventflow.context import Context
from eventflow.utils import resolve_callable

from .base import BaseAction


class CallableAction(BaseAction):
    def __init__(self, name: str, options: Dict[str, Any]):
        super().__init__(name, options)
        target = options.get("target")
        if not target:
            raise ValueError(f"callable action '{name}' missing target")
        self._fn = resolve_callable(target)
        if not callable(self._fn):
            raise ValueError(f"target '{target}' of action '{name}' is not callable")

    def __call__(self, ctx: Context, payload: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
        return self._fn(ctx, payload)
