# SPDX-License-Identifier: Apache-2.0
"""Cancellation and deadline handle."""
from __future__ import annotations

import time

from eventflow.context import Context


def test_background_never_done():
    ctx = Context.background()
    assert ctx.deadline is None
    assert ctx.remaining() is None
    assert not ctx.expired
    assert not ctx.done


def test_cancel():
    ctx = Context.background()
    ctx.cancel()
    assert ctx.cancelled
    assert ctx.done


def test_timeout_expires():
    ctx = Context.with_timeout(0.01)
    assert ctx.remaining() <= 0.01
    time.sleep(0.02)
    assert ctx.expired
    assert ctx.done
    assert ctx.remaining() == 0.0


def test_long_timeout_not_expired():
    ctx = Context.with_timeout(60)
    assert not ctx.done
    assert 0 < ctx.remaining() <= 60
