# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Application configuration for composebasics.
#
# Notes:
#	- AppConfig is a frozen dict wrapper with get(key, default).
#	- Lookups fall back to DEFAULTS before the caller's default.
#	- Dark mode is configuration, never detected from the system.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	Dev Team				Initial coding / release (moved out of app.py)
# 10/11/2026	Dev Team				Add lazy list + animation keys
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


DEFAULTS: dict[str, Any] = {
	# Window
	"title": "composebasics",
	"width": 480,
	"height": 800,

	# Content
	"dark_theme": False,
	"screen": "list",

	# Lazy list
	"viewport_rows": 10,
	"overscan_rows": 2,

	# Animation
	"animation_ms": 300,
	"frame_ms": 16,

	# Logging
	"log_level": "INFO",
	"log_console": True,
	"log_file": None,

	# Telemetry
	"telemetry_enabled": False,
	"telemetry_sink": "null",
}


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Light wrapper for config options.
	"""
	options: Mapping[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is not None and key in self.options:
			return self.options[key]
		return DEFAULTS.get(key, default)

	def get_int(self, key: str, default: int = 0) -> int:
		value = self.get(key, default)
		try:
			return int(value)
		except (TypeError, ValueError):
			return default

	def with_options(self, **overrides: Any) -> "AppConfig":
		merged = dict(self.options or {})
		merged.update(overrides)
		return AppConfig(merged)
