# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for dispatcher tests."""
from __future__ import annotations

from typing import Any, Mapping

import pytest

from eventflow.actions.base import Action
from eventflow.context import Context
from eventflow.dispatcher import EventDispatcher


class StraightCheck:
    """Action body whose failure can be toggled from a test."""

    def __init__(self):
        self.error: Exception | None = None
        self.calls = 0

    def __call__(self, ctx: Context, payload: Mapping[str, Any]):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return None


def divide(ctx: Context, payload: Mapping[str, Any]):
    if "dividend" not in payload:
        raise KeyError("no dividend passed")
    if "divider" not in payload:
        raise KeyError("no divider passed")
    dividend, divider = payload["dividend"], payload["divider"]
    if not isinstance(dividend, int) or not isinstance(divider, int):
        raise TypeError("dividend and divider expected to be of type int")
    if divider == 0:
        raise ValueError("the passed divider shouldn't be equal to zero")
    return {"result": dividend // divider}


class Recorder:
    """Action body that records every call and succeeds."""

    def __init__(self):
        self.calls = []

    def __call__(self, ctx: Context, payload: Mapping[str, Any]):
        self.calls.append(dict(payload))
        return {"seen": len(self.calls)}


@pytest.fixture
def straight_check() -> StraightCheck:
    return StraightCheck()


@pytest.fixture
def dispatcher(straight_check) -> EventDispatcher:
    disp = EventDispatcher()
    disp.add_action(Action(name="straight_check", do=straight_check))
    disp.add_action(Action(name="divider", do=divide))
    return disp


@pytest.fixture
def ctx() -> Context:
    return Context.background()
