# ---------------------------------------------------------------------------
# File: animation.py
# ---------------------------------------------------------------------------
# Description:
#	Frame clock + color animation for composebasics.
#
# Notes:
#	- FrameClock is advanced explicitly (host frame loop or tests); nothing
#	  here reads wall time.
#	- animate_color() keeps its progress in a retained MutableState, so each
#	  frame tick recomposes only the scope that reads the color.
#	- Retargeting mid-flight starts from the current (interpolated) color.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	Dev Team				Initial coding / release
# 10/10/2026	Dev Team				Dispose running animations on scope teardown
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

from composebasics.runtime.color import Color
from composebasics.runtime.state import MutableState

if TYPE_CHECKING:
	from composebasics.runtime.composer import Scope


DEFAULT_DURATION_MS = 300

FrameCallback = Callable[[float], None]
Easing = Callable[[float], float]


def linear(t: float) -> float:
	return t


def ease_in_out(t: float) -> float:
	return t * t * (3.0 - 2.0 * t)


class FrameClock:
	"""
	FrameClock

	Monotonic millisecond clock with frame callbacks.
	"""

	def __init__(self, start_ms: float = 0.0) -> None:
		self.now_ms = float(start_ms)
		self._callbacks: list[FrameCallback] = []

	@property
	def busy(self) -> bool:
		return bool(self._callbacks)

	def post(self, cb: FrameCallback) -> None:
		if cb not in self._callbacks:
			self._callbacks.append(cb)

	def remove(self, cb: FrameCallback) -> None:
		if cb in self._callbacks:
			self._callbacks.remove(cb)

	def advance(self, ms: float) -> None:
		if ms < 0:
			raise ValueError(f"Cannot move the frame clock backwards: {ms!r}")

		self.now_ms += ms

		for cb in list(self._callbacks):
			cb(self.now_ms)


class ColorAnimation:
	"""
	Interpolates a MutableState[Color] towards a target over duration_ms.
	"""

	def __init__(
		self,
		clock: FrameClock,
		value: MutableState[Color],
		*,
		duration_ms: int = DEFAULT_DURATION_MS,
		easing: Easing = ease_in_out,
	) -> None:
		self._clock = clock
		self._value = value
		self.duration_ms = duration_ms
		self.easing = easing

		self.target = value.peek()
		self._start = value.peek()
		self._start_ms = clock.now_ms
		self._active = False

	@property
	def running(self) -> bool:
		return self._active

	def animate_to(self, target: Color) -> None:
		if target == self.target:
			return

		self._start = self._value.peek()
		self._start_ms = self._clock.now_ms
		self.target = target

		if self.duration_ms <= 0:
			self._finish()
			return

		self._active = True
		self._clock.post(self._tick)

	def snap_to(self, target: Color) -> None:
		self.target = target
		self._finish()

	def dispose(self) -> None:
		self._active = False
		self._clock.remove(self._tick)

	def _tick(self, now_ms: float) -> None:
		elapsed = now_ms - self._start_ms
		if elapsed >= self.duration_ms:
			self._finish()
			return

		fraction = self.easing(elapsed / self.duration_ms)
		self._value.set(self._start.lerp(self.target, fraction))

	def _finish(self) -> None:
		self._active = False
		self._clock.remove(self._tick)
		self._value.set(self.target)


def animate_color(
	scope: "Scope",
	target: Color,
	*,
	label: str = "color",
	duration_ms: Optional[int] = None,
) -> Color:
	"""
	Return the current animated color for target within scope.

	The first composition returns target directly; later target changes
	animate from the displayed color.
	"""
	value = scope.state(f"animate_color.{label}.value", target)
	animation = scope.remember(
		f"animate_color.{label}.animation",
		lambda: ColorAnimation(
			scope.clock,
			value,
			duration_ms=scope.composer.animation_ms if duration_ms is None else duration_ms,
		),
	)
	animation.animate_to(target)

	return value.value
