# SPDX-License-Identifier: Apache-2.0
"""Sequential event dispatcher with fail-fast actions and resumable jobs."""
from __future__ import annotations

from .actions.base import Action
from .config import load_config
from .context import Context
from .dispatcher import EventDispatcher
from .errors import (
    ActionExecutionError,
    ActionNotFoundError,
    DuplicateActionError,
    EventflowError,
    InvalidEventError,
    InvalidJobIdError,
    JobAlreadySucceededError,
)
from .snapshots import ActionResult, Snapshot

__all__ = [
    "Action",
    "ActionExecutionError",
    "ActionNotFoundError",
    "ActionResult",
    "Context",
    "DuplicateActionError",
    "EventDispatcher",
    "EventflowError",
    "InvalidEventError",
    "InvalidJobIdError",
    "JobAlreadySucceededError",
    "Snapshot",
    "load_config",
]
