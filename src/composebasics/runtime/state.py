# ---------------------------------------------------------------------------
# File: state.py
# ---------------------------------------------------------------------------
# Description:
#	Retained state for composebasics.
#
# Notes:
#	- MutableState is a single observable value (the "state cell").
#	- StateStore retains values keyed by (scope path, slot) across re-renders.
#	- Writes of an equal value are ignored (no notification).
#	- Teardown runs dispose() on retained objects that expose it.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Dev Team				Initial coding / release
# 10/07/2026	Dev Team				Track reads through observe_reads()
# 10/09/2026	Dev Team				Dispose retained objects on forget()
# 10/18/2026	Dev Team				Document write-hook scope of mutable_state_of()
# ---------------------------------------------------------------------------

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from composebasics.core.logging import get_app_logger


T = TypeVar("T")

ScopePath = tuple[str, ...]
StateKey = tuple[ScopePath, str]

Subscriber = Callable[["MutableState[Any]"], None]
ReadHook = Callable[["MutableState[Any]"], None]
WriteHook = Callable[["MutableState[Any]"], None]


_log = get_app_logger("runtime.state")

# Innermost observer is notified of tracked reads (single UI thread).
_read_observers: list[ReadHook] = []


@contextmanager
def observe_reads(observer: ReadHook) -> Iterator[None]:
	"""
	Route tracked reads of any MutableState to observer while active.
	"""
	_read_observers.append(observer)
	try:
		yield
	finally:
		_read_observers.pop()


class MutableState(Generic[T]):
	"""
	MutableState

	Holds one value and notifies subscribers when it changes.

	- value:		Tracked read (reported to the active observer) / write.
	- peek():		Untracked read.
	- set():		Write; no-op when the new value equals the current one.
	"""

	__slots__ = ("_value", "_subscribers", "_write_hook", "key")

	def __init__(
		self,
		value: T,
		*,
		key: Optional[StateKey] = None,
		write_hook: Optional[WriteHook] = None,
	) -> None:
		self._value = value
		self._subscribers: list[Subscriber] = []
		self._write_hook = write_hook
		self.key = key

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} key={self.key!r} value={self._value!r}>"

	@property
	def value(self) -> T:
		if _read_observers:
			_read_observers[-1](self)
		return self._value

	@value.setter
	def value(self, value: T) -> None:
		self.set(value)

	def peek(self) -> T:
		return self._value

	def set(self, value: T) -> None:
		if value == self._value:
			return

		self._value = value

		if self._write_hook is not None:
			self._write_hook(self)

		# Subscribers may unsubscribe while being notified.
		for cb in list(self._subscribers):
			cb(self)

	def update(self, fn: Callable[[T], T]) -> None:
		self.set(fn(self._value))

	# -----------------------------------------------------------------------
	# Subscriptions
	# -----------------------------------------------------------------------

	def subscribe(self, cb: Subscriber) -> None:
		if cb not in self._subscribers:
			self._subscribers.append(cb)

	def unsubscribe(self, cb: Subscriber) -> None:
		if cb in self._subscribers:
			self._subscribers.remove(cb)

	def clear_subscribers(self) -> None:
		self._subscribers.clear()

	@property
	def subscriber_count(self) -> int:
		return len(self._subscribers)


def mutable_state_of(value: T) -> MutableState[T]:
	"""
	Create a state cell owned outside any scope.

	Reads during composition are still tracked, so hoisted state held by a
	caller (or a test) recomposes its readers. It has no write hook: the
	composer's state.write counter only covers cells retained in its store.
	"""
	return MutableState(value)


class StateStore:
	"""
	StateStore

	Retained values keyed by (scope path, slot).

	- remember():		Create on first use, then return the same object.
	- remember_state():	Same, wrapped in a tracked MutableState.
	- forget():			Teardown for one scope path (unmount).
	"""

	def __init__(self, *, write_hook: Optional[WriteHook] = None) -> None:
		self._values: dict[StateKey, Any] = {}
		self._slots_by_path: dict[ScopePath, list[str]] = {}
		self._write_hook = write_hook

	def __len__(self) -> int:
		return len(self._values)

	def __contains__(self, key: object) -> bool:
		return key in self._values

	def __iter__(self) -> Iterator[StateKey]:
		return iter(list(self._values.keys()))

	def remember(self, path: ScopePath, slot: str, factory: Callable[[], T]) -> T:
		key = (path, slot)
		if key in self._values:
			return self._values[key]

		value = factory()
		self._values[key] = value
		self._slots_by_path.setdefault(path, []).append(slot)
		return value

	def remember_state(self, path: ScopePath, slot: str, initial: T) -> MutableState[T]:
		return self.remember(
			path,
			slot,
			lambda: MutableState(
				initial,
				key=(path, slot),
				write_hook=self._write_hook,
			),
		)

	def get(self, path: ScopePath, slot: str, default: Any = None) -> Any:
		return self._values.get((path, slot), default)

	def slots(self, path: ScopePath) -> list[str]:
		return list(self._slots_by_path.get(path, []))

	def paths(self) -> list[ScopePath]:
		return list(self._slots_by_path.keys())

	def forget(self, path: ScopePath) -> int:
		"""
		Drop every value retained for path. Returns the number removed.
		"""
		slots = self._slots_by_path.pop(path, [])

		for slot in slots:
			value = self._values.pop((path, slot), None)

			if isinstance(value, MutableState):
				value.clear_subscribers()

			dispose = getattr(value, "dispose", None)
			if callable(dispose):
				dispose()

		if slots:
			_log.debug("forget path=%s slots=%s", "/".join(path), slots)

		return len(slots)

	def clear(self) -> None:
		for path in self.paths():
			self.forget(path)
