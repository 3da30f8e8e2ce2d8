# ---------------------------------------------------------------------------
# File: test_telemetry.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for composebasics.core.telemetry.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#	- Uses MemorySink for deterministic assertions.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	Dev Team				Initial tests
# 10/10/2026	Dev Team				Cover MemorySink.total() + composer counters
# 10/18/2026	Dev Team				state.write covers retained cells only
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

from composebasics.core.telemetry import (
	LogSink,
	MemorySink,
	NullSink,
	Telemetry,
	get_telemetry,
	init_telemetry,
)
from composebasics.runtime.composer import Composer, Scope
from composebasics.runtime.nodes import ViewNode, button
from composebasics.runtime.state import mutable_state_of


def test_telemetry_disabled_is_noop():
	sink = MemorySink()
	t = Telemetry(enabled=False, sink=sink)

	t.event("app.start", {"x": 1})
	t.counter("compose.invoke", 3, {"fn": "greeting"})

	with t.timer("recompose.duration_ms"):
		pass

	assert sink.events == []
	assert sink.metrics == []


def test_telemetry_event_emits_to_sink():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("app.start", {"foo": "bar"})

	assert len(sink.events) == 1
	ev = sink.events[0]
	assert ev.name == "app.start"
	assert ev.attrs == {"foo": "bar"}

	# slots=True dataclasses don't have __dict__
	assert isinstance(ev.timestamp, float)
	assert ev.timestamp > 0.0


def test_telemetry_counter_emits_metric_to_sink():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.counter("compose.invoke", 2, {"fn": "counter"})

	assert len(sink.metrics) == 1
	m = sink.metrics[0]
	assert m.name == "compose.invoke"
	assert m.value == 2.0
	assert m.attrs["fn"] == "counter"


def test_telemetry_timer_emits_metric():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	with t.timer("recompose.duration_ms", {"pass": 1}):
		pass

	assert len(sink.metrics) == 1
	m = sink.metrics[0]
	assert m.name == "recompose.duration_ms"
	assert m.value >= 0.0
	assert m.attrs["pass"] == 1


def test_memorysink_total_filters_on_attrs():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.counter("compose.invoke", attrs={"fn": "greeting"})
	t.counter("compose.invoke", attrs={"fn": "greeting"})
	t.counter("compose.invoke", attrs={"fn": "counter"})
	t.counter("state.write")

	assert sink.total("compose.invoke") == 3
	assert sink.total("compose.invoke", fn="greeting") == 2
	assert sink.total("compose.invoke", fn="missing") == 0


def test_memorysink_clear():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("x")
	t.counter("y")

	sink.clear()

	assert sink.events == []
	assert sink.metrics == []


def test_logsink_writes_debug(caplog):
	logger = logging.getLogger("composebasics.app.telemetry.test")
	t = Telemetry(enabled=True, sink=LogSink(logger))

	with caplog.at_level(logging.DEBUG, logger=logger.name):
		t.counter("state.write")

	assert "state.write" in caplog.text


def test_get_telemetry_safe_before_init_returns_telemetry():
	t = get_telemetry()

	t.event("should.not.raise")
	t.counter("should.not.raise", 1)

	assert isinstance(t, Telemetry)


def test_init_telemetry_disabled_is_noop():
	t = init_telemetry({"telemetry_enabled": False, "telemetry_sink": "memory"})

	assert t is get_telemetry()
	assert t.enabled is False


def test_init_telemetry_memory_sink():
	t = init_telemetry({"telemetry_enabled": True, "telemetry_sink": "memory"})

	assert t.enabled is True
	assert isinstance(t._sink, MemorySink)


def test_init_telemetry_log_without_logger_uses_nullsink():
	t = init_telemetry({"telemetry_enabled": True, "telemetry_sink": "log"}, logger=None)

	assert isinstance(t._sink, NullSink)


def test_init_telemetry_unknown_sink_uses_nullsink():
	t = init_telemetry({"telemetry_enabled": True, "telemetry_sink": "nope"}, logger=None)

	assert isinstance(t._sink, NullSink)


def _toggle(scope: Scope) -> ViewNode:
	flag = scope.state("flag", False)
	return button(str(flag.value), on_click=lambda: flag.set(not flag.value))


def test_composer_reports_invocations_and_writes():
	sink = MemorySink()
	composer = Composer(telemetry=Telemetry(enabled=True, sink=sink))

	tree = composer.set_content(_toggle)
	composer.dispatch(tree.on_click)

	assert sink.total("compose.invoke", fn="_toggle") == 2
	assert sink.total("state.write") == 1
	assert [m.name for m in sink.metrics].count("recompose.duration_ms") == 1

	composer.dispose()
	assert sink.total("compose.dispose") == 1


def test_state_write_counts_retained_cells_only():
	sink = MemorySink()
	composer = Composer(telemetry=Telemetry(enabled=True, sink=sink))
	hoisted = mutable_state_of(0)

	def parent(scope: Scope) -> ViewNode:
		own = scope.state("own", 0)
		return button(f"{own.value}/{hoisted.value}", on_click=lambda: own.set(own.peek() + 1))

	tree = composer.set_content(parent)

	composer.dispatch(hoisted.set, 1)
	assert sink.total("state.write") == 0
	assert composer.tree().text == "0/1"

	composer.dispatch(tree.on_click)
	assert sink.total("state.write") == 1
	assert composer.tree().text == "1/1"

	composer.dispose()
