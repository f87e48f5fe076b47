# SPDX-License-Identifier: Apache-2.0
"""
Job snapshots and their in-memory store.

A Snapshot records one job: the originating event and context, the results
of every action completed so far and the actions still pending. The plan is
fixed at dispatch time, so ``len(results) + len(pending)`` never changes
over the life of a snapshot.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping

from .actions.base import Action
from .context import Context
from .errors import InvalidJobIdError
from .messages import Event


@dataclass(frozen=True, slots=True)
class ActionResult:
    """A successfully completed action, its input and its output."""

    name: str
    input: Mapping[str, Any]
    output: Mapping[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(slots=True)
class Snapshot:
    id: int
    event: Event
    context: Context
    pending: List[Action]
    results: List[ActionResult] = field(default_factory=list)
    success: bool = False

    @property
    def planned(self) -> int:
        return len(self.results) + len(self.pending)

    @property
    def last_output(self) -> Mapping[str, Any] | None:
        return self.results[-1].output if self.results else None

    def copy(self) -> "Snapshot":
        """Detached copy for callers; lists are new, records are shared."""
        return Snapshot(
            id=self.id,
            event=self.event,
            context=self.context,
            pending=list(self.pending),
            results=list(self.results),
            success=self.success,
        )


class SnapshotStore:
    """Maps job ids to snapshots.

    Ids are assigned densely from 0, so any id in ``range(len(store))`` is
    known once it has been stored.
    """

    def __init__(self):
        self._snapshots: Dict[int, Snapshot] = {}

    def put(self, snapshot: Snapshot) -> None:
        self._snapshots[snapshot.id] = snapshot

    def get(self, job_id: int) -> Snapshot:
        if not isinstance(job_id, int) or isinstance(job_id, bool):
            raise InvalidJobIdError(job_id)
        if job_id < 0 or job_id not in self._snapshots:
            raise InvalidJobIdError(job_id)
        return self._snapshots[job_id]

    def job_ids(self) -> List[int]:
        return sorted(self._snapshots)

    def __contains__(self, job_id: object) -> bool:
        return job_id in self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)
