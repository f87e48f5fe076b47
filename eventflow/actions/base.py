# SPDX-License-Identifier: Apache-2.0
"""Action primitives executed by the dispatcher."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from eventflow.context import Context

ActionFn = Callable[[Context, Mapping[str, Any]], Optional[Mapping[str, Any]]]


@dataclass(frozen=True, slots=True)
class Action:
    """A named pipeline step.

    ``do`` receives the job context and the event as its input mapping and
    returns an output mapping. Raising any exception marks the step failed.
    """

    name: str
    do: ActionFn


class BaseAction:
    """Configurable action type built from an ``actions:`` config entry."""

    def __init__(self, name: str, options: Dict[str, Any]):
        self.name = name
        self.options = options

    def __call__(self, ctx: Context, payload: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:  # pragma: no cover - interface
        raise NotImplementedError

    def as_action(self) -> Action:
        return Action(name=self.name, do=self)
