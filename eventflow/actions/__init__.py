# SPDX-License-Identifier: Apache-2.0
"""Action type factory."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List

from eventflow.config import ActionConfig

from .base import Action, ActionFn, BaseAction

logger = logging.getLogger(__name__)

ACTION_TYPES: dict[str, Callable[..., BaseAction]] = {}


def register(action_type: str, factory: Callable[..., BaseAction]) -> None:
    if action_type in ACTION_TYPES:
        raise ValueError(f"action type '{action_type}' already registered")
    ACTION_TYPES[action_type] = factory


def build_actions(action_configs: Iterable[ActionConfig]) -> List[Action]:
    actions: List[Action] = []
    for cfg in action_configs:
        if cfg.type not in ACTION_TYPES:
            raise ValueError(f"unknown action type '{cfg.type}'")
        actions.append(ACTION_TYPES[cfg.type](cfg.name, cfg.options).as_action())
    logger.info("built %d actions from config", len(actions))
    return actions


from .callable import CallableAction
from .log import LogAction

register("log", LogAction)
register("callable", CallableAction)

__all__ = ["Action", "ActionFn", "BaseAction", "build_actions", "register"]
