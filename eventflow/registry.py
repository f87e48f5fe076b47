# SPDX-License-Identifier: Apache-2.0
"""Ordered, name-unique collection of actions."""
from __future__ import annotations

from typing import Iterator, List, Tuple

from .actions.base import Action
from .errors import ActionNotFoundError, DuplicateActionError


class ActionRegistry:
    """Keeps actions in registration order.

    Not synchronised on its own; the dispatcher serialises every access.
    """

    def __init__(self):
        self._actions: List[Action] = []

    def add(self, action: Action) -> None:
        if any(existing.name == action.name for existing in self._actions):
            raise DuplicateActionError(action.name)
        self._actions.append(action)

    def remove(self, action: Action | str) -> Action:
        name = action if isinstance(action, str) else action.name
        for idx, existing in enumerate(self._actions):
            if existing.name == name:
                return self._actions.pop(idx)
        raise ActionNotFoundError(name)

    def plan(self) -> Tuple[Action, ...]:
        """Return a copy of the current order for a new job."""
        return tuple(self._actions)

    def __contains__(self, name: object) -> bool:
        return any(existing.name == name for existing in self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self.plan())
