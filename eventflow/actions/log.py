# SPDX-License-Identifier: Apache-2.0
"""Simple logging action for debugging and audits."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from eventflow.context import Context

from .base import BaseAction

log = logging.getLogger(__name__)


class LogAction(BaseAction):
    def __call__(self, ctx: Context, payload: Mapping[str, Any]) -> Mapping[str, Any]:
        level = logging.getLevelName(str(self.options.get("level", "info")).upper())
        if not isinstance(level, int):
            raise ValueError(f"log action '{self.name}' has unknown level {self.options.get('level')!r}")
        log.log(level, "[action %s] input=%s", self.name, dict(payload))
        return {}
