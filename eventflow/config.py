# SPDX-License-Identifier: Apache-2.0
"""Configuration loader for dispatcher action pipelines."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml


@dataclass(slots=True)
class ActionConfig:
    name: str
    type: str
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class DispatcherConfig:
    version: int
    actions: List[ActionConfig]


def _parse_actions(items: Dict[str, Any]) -> List[ActionConfig]:
    if not isinstance(items, dict):
        raise ValueError("'actions' must be a mapping of action name to settings")
    actions: List[ActionConfig] = []
    for name, payload in items.items():
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            raise ValueError(f"action '{name}' must be a mapping")
        action_type = payload.get("type", name)
        options = {k: v for k, v in payload.items() if k != "type"}
        actions.append(ActionConfig(name=str(name), type=action_type, options=options))
    return actions


def parse_config(raw: Dict[str, Any] | None) -> DispatcherConfig:
    raw = raw or {}
    version = int(raw.get("version", 1))
    actions = _parse_actions(raw.get("actions") or {})
    return DispatcherConfig(version=version, actions=actions)


def load_config(path: str | Path) -> DispatcherConfig:
    return parse_config(yaml.safe_load(Path(path).read_text()))
