# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#   Lightweight composition telemetry for composebasics.
#
#   The composer reports through this facade:
#     - compose.invoke          (counter, one per scope invocation)
#     - compose.dispose         (counter, one per torn-down scope)
#     - state.write             (counter, one per effective state write)
#     - recompose.duration_ms   (timer)
#
# Notes:
#   - Disabled telemetry is a no-op; callers never need to check.
#   - Sinks decouple the facade from where metrics end up.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	Dev Team				Initial coding / release
# 10/10/2026	Dev Team				Add MemorySink.total() for recomposition assertions
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol


@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: Dict[str, Any]


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: Dict[str, Any]


class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class NullSink:
	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Writes events and metrics to a logger at DEBUG level.
	"""

	def __init__(self, logger: logging.Logger) -> None:
		self._log = logger

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.debug("telemetry.event %s %s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.debug("telemetry.metric %s=%s %s", metric.name, metric.value, metric.attrs)


class MemorySink:
	"""
	Keeps everything in memory; used by tests.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def total(self, name: str, **match: Any) -> float:
		"""
		Sum metric values by name, optionally filtered on attrs.
		"""
		return sum(
			m.value
			for m in self.metrics
			if m.name == name and all(m.attrs.get(k) == v for k, v in match.items())
		)

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class Telemetry:
	def __init__(self, enabled: bool, sink: TelemetrySink) -> None:
		self._enabled = enabled
		self._sink = sink

	@property
	def enabled(self) -> bool:
		return self._enabled

	def event(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> None:
		if self._enabled:
			self._sink.emit_event(TelemetryEvent(name, time.time(), attrs or {}))

	def counter(self, name: str, value: int = 1, attrs: Optional[Dict[str, Any]] = None) -> None:
		self.metric(name, float(value), attrs)

	def metric(self, name: str, value: float, attrs: Optional[Dict[str, Any]] = None) -> None:
		if self._enabled:
			self._sink.emit_metric(TelemetryMetric(name, value, attrs or {}))

	def timer(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> "_Timer":
		return _Timer(self, name, attrs or {})


class _Timer:
	def __init__(self, telemetry: Telemetry, name: str, attrs: Dict[str, Any]) -> None:
		self._telemetry = telemetry
		self._name = name
		self._attrs = attrs
		self._start = 0.0

	def __enter__(self) -> "_Timer":
		self._start = time.perf_counter()
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		elapsed_ms = (time.perf_counter() - self._start) * 1000.0
		self._telemetry.metric(self._name, elapsed_ms, self._attrs)


# ---------------------------------------------------------------------------
# Process-wide instance
# ---------------------------------------------------------------------------

_telemetry: Optional[Telemetry] = None


def init_telemetry(cfg: Any, logger: Optional[logging.Logger] = None) -> Telemetry:
	"""
	Build the process-wide Telemetry from cfg.

	cfg keys:
		telemetry_enabled:	bool (default False)
		telemetry_sink:		"null" | "log" | "memory" (default "null")
	"""
	global _telemetry

	enabled = bool(cfg.get("telemetry_enabled", False))
	sink_name = cfg.get("telemetry_sink", "null")

	sink: TelemetrySink
	if not enabled:
		sink = NullSink()
	elif sink_name == "log" and logger is not None:
		sink = LogSink(logger)
	elif sink_name == "memory":
		sink = MemorySink()
	else:
		sink = NullSink()

	_telemetry = Telemetry(enabled, sink)
	return _telemetry


def get_telemetry() -> Telemetry:
	"""
	Return the process-wide Telemetry (disabled until init_telemetry()).
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())

	return _telemetry
