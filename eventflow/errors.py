# SPDX-License-Identifier: Apache-2.0
"""
Error classes raised by the event dispatcher.

Every failure is a typed, recoverable outcome:
- DuplicateActionError / ActionNotFoundError: registry mutations
- InvalidEventError: nothing was dispatched, no job id consumed
- ActionExecutionError: an action failed; the job can be retried
- InvalidJobIdError / JobAlreadySucceededError: retry misuse
"""
from __future__ import annotations

from typing import Optional


class EventflowError(Exception):
    """Base exception for eventflow."""


class DuplicateActionError(EventflowError):
    """Raised when an action with the same name is already registered."""

    def __init__(self, name: str):
        super().__init__(f"action with name {name} already exists")
        self.name = name


class ActionNotFoundError(EventflowError):
    """Raised when removing an action that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"action {name} doesn't exist")
        self.name = name


class InvalidEventError(EventflowError):
    """Raised when the submitted event is absent, empty, or not a mapping."""


class ActionExecutionError(EventflowError):
    """
    An action failed while a job was executing.

    The job stays retryable: its snapshot keeps the failed action at the head
    of the pending list. ``job_id`` is set by the dispatcher before the error
    reaches the caller.
    """

    def __init__(self, action: str, cause: BaseException, job_id: Optional[int] = None):
        super().__init__(f"{action} action failed: {cause}")
        self.action = action
        self.cause = cause
        self.job_id = job_id


class InvalidJobIdError(EventflowError):
    """Raised for negative job ids or ids never assigned by the dispatcher."""

    def __init__(self, job_id: int):
        super().__init__(f"invalid job id {job_id}")
        self.job_id = job_id


class JobAlreadySucceededError(EventflowError):
    """Raised when retry is called for a job that already completed."""

    def __init__(self, job_id: int):
        super().__init__(f"retry called for a successfully completed job {job_id}")
        self.job_id = job_id
