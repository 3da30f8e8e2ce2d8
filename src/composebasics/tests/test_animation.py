# ---------------------------------------------------------------------------
# File: test_animation.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for FrameClock, ColorAnimation and animate_color.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	Dev Team				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from composebasics.runtime.animation import (
	ColorAnimation,
	FrameClock,
	animate_color,
	ease_in_out,
	linear,
)
from composebasics.runtime.color import BLUE, RED, TRANSPARENT
from composebasics.runtime.composer import Composer, Scope
from composebasics.runtime.nodes import ViewNode, text
from composebasics.runtime.state import mutable_state_of


def test_easing_endpoints():
	for easing in (linear, ease_in_out):
		assert easing(0.0) == 0.0
		assert easing(1.0) == 1.0

	assert ease_in_out(0.5) == pytest.approx(0.5)


def test_frame_clock_runs_callbacks_and_rejects_negative():
	clock = FrameClock()
	ticks: list[float] = []

	clock.post(ticks.append)
	assert clock.busy is True

	clock.advance(16)
	clock.advance(16)
	clock.remove(ticks.append)
	clock.advance(16)

	assert ticks == [16.0, 32.0]
	assert clock.busy is False

	with pytest.raises(ValueError):
		clock.advance(-1)


def test_color_animation_reaches_target_and_stops():
	clock = FrameClock()
	value = mutable_state_of(TRANSPARENT)
	anim = ColorAnimation(clock, value, duration_ms=100, easing=linear)

	anim.animate_to(RED)
	assert anim.running is True
	assert value.peek() == TRANSPARENT

	clock.advance(50)
	assert value.peek() not in (TRANSPARENT, RED)

	clock.advance(50)
	assert value.peek() == RED
	assert anim.running is False
	assert clock.busy is False


def test_color_animation_retarget_starts_from_current_value():
	clock = FrameClock()
	value = mutable_state_of(TRANSPARENT)
	anim = ColorAnimation(clock, value, duration_ms=100, easing=linear)

	anim.animate_to(RED)
	clock.advance(50)
	midway = value.peek()

	# No jump back to the old start color when retargeting.
	anim.animate_to(BLUE)
	assert value.peek() == midway

	clock.advance(100)
	assert value.peek() == BLUE


def test_zero_duration_snaps():
	clock = FrameClock()
	value = mutable_state_of(TRANSPARENT)
	anim = ColorAnimation(clock, value, duration_ms=0)

	anim.animate_to(RED)

	assert value.peek() == RED
	assert clock.busy is False


def test_dispose_unregisters_from_clock():
	clock = FrameClock()
	anim = ColorAnimation(clock, mutable_state_of(TRANSPARENT), duration_ms=100)

	anim.animate_to(RED)
	anim.dispose()

	assert clock.busy is False
	assert anim.running is False


def _swatch(scope: Scope) -> ViewNode:
	on = scope.state("on", False)
	color = animate_color(scope, RED if on.value else TRANSPARENT)
	return text("swatch", background=color, on_click=lambda: on.update(lambda v: not v))


def test_animate_color_recomposes_on_frames():
	c = Composer(animation_ms=200)
	tree = c.set_content(_swatch)
	assert tree.attr("background") == TRANSPARENT

	c.dispatch(tree.on_click)
	assert c.tree().attr("background") == TRANSPARENT
	assert c.clock.busy is True

	assert c.advance_frame(100) is True
	assert c.tree().attr("background") not in (TRANSPARENT, RED)

	c.advance_frame(100)
	assert c.tree().attr("background") == RED
	assert c.clock.busy is False


def test_animate_color_disposed_with_scope():
	c = Composer(animation_ms=200)
	tree = c.set_content(_swatch)

	c.dispatch(tree.on_click)
	assert c.clock.busy is True

	c.dispose()
	assert c.clock.busy is False
