# ---------------------------------------------------------------------------
# File: test_state.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for MutableState + StateStore.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Dev Team				Initial tests
# 10/09/2026	Dev Team				Cover dispose() on forget
# ---------------------------------------------------------------------------

from __future__ import annotations

from composebasics.runtime.state import MutableState, StateStore, mutable_state_of, observe_reads


def test_state_reads_latest_write():
	s = mutable_state_of(1)

	s.set(2)
	assert s.value == 2

	s.value = 3
	assert s.peek() == 3

	s.update(lambda v: v * 10)
	assert s.value == 30


def test_state_notifies_subscribers_on_change_only():
	s = mutable_state_of("a")
	seen: list[str] = []

	s.subscribe(lambda st: seen.append(st.peek()))

	s.set("b")
	s.set("b")
	s.set("c")

	assert seen == ["b", "c"]


def test_state_unsubscribe_stops_notifications():
	s = mutable_state_of(0)
	calls: list[int] = []

	def cb(st: MutableState[int]) -> None:
		calls.append(st.peek())

	s.subscribe(cb)
	s.subscribe(cb)
	assert s.subscriber_count == 1

	s.set(1)
	s.unsubscribe(cb)
	s.set(2)

	assert calls == [1]


def test_observe_reads_sees_tracked_reads_only():
	reads: list[MutableState[int]] = []
	outer: list[MutableState[int]] = []
	s = mutable_state_of(5)

	with observe_reads(outer.append):
		with observe_reads(reads.append):
			_ = s.value
			_ = s.peek()

	# Outside any observer nothing is reported.
	_ = s.value

	assert reads == [s]
	assert outer == []


def test_store_remember_creates_once():
	store = StateStore()
	made: list[int] = []

	def factory() -> list[int]:
		made.append(1)
		return []

	a = store.remember(("root",), "items", factory)
	b = store.remember(("root",), "items", factory)

	assert a is b
	assert made == [1]
	assert len(store) == 1


def test_store_keys_are_per_path():
	store = StateStore()

	a = store.remember_state(("root", "a"), "count", 0)
	b = store.remember_state(("root", "b"), "count", 0)

	a.set(3)

	assert b.peek() == 0
	assert a.key == (("root", "a"), "count")
	assert store.slots(("root", "a")) == ["count"]


def test_store_forget_drops_values_and_subscribers():
	store = StateStore()
	s = store.remember_state(("root", "x"), "flag", False)
	s.subscribe(lambda st: None)

	removed = store.forget(("root", "x"))

	assert removed == 1
	assert s.subscriber_count == 0
	assert store.get(("root", "x"), "flag") is None

	# Re-remembering after teardown starts fresh.
	fresh = store.remember_state(("root", "x"), "flag", False)
	assert fresh is not s


def test_store_forget_calls_dispose():
	class _Disposable:
		def __init__(self) -> None:
			self.disposed = False

		def dispose(self) -> None:
			self.disposed = True

	store = StateStore()
	obj = store.remember(("root",), "res", _Disposable)

	store.forget(("root",))

	assert obj.disposed is True


def test_store_write_hook_called_on_effective_writes():
	writes: list[object] = []
	store = StateStore(write_hook=lambda st: writes.append(st.key))

	s = store.remember_state(("root",), "n", 0)
	s.set(0)
	s.set(1)

	assert writes == [(("root",), "n")]


def test_store_clear_forgets_everything():
	store = StateStore()
	store.remember_state(("a",), "x", 1)
	store.remember_state(("b",), "y", 2)

	store.clear()

	assert len(store) == 0
	assert store.paths() == []
