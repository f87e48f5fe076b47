# SPDX-License-Identifier: Apache-2.0
"""Event envelope shared by the dispatcher and its actions."""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .errors import InvalidEventError

Event = Mapping[str, Any]


def freeze_event(event: Any) -> Event:
    """Validate an incoming event and return a read-only copy of it."""
    if event is None:
        raise InvalidEventError("event is required")
    if not isinstance(event, Mapping):
        raise InvalidEventError(f"event must be a mapping, got {type(event).__name__}")
    if not event:
        raise InvalidEventError("event must not be empty")
    return MappingProxyType(dict(event))
