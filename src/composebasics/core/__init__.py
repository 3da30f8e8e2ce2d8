# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for composebasics (logging, telemetry, config).
#
# Notes:
#	Keep this lightweight. Re-export stable public helpers.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	Dev Team				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .config import AppConfig
from .logging import init_logging, get_logger, get_app_logger
from .telemetry import init_telemetry, get_telemetry

__all__ = [
	"AppConfig",
	"get_logger",
	"get_app_logger",
	"init_logging",
	"init_telemetry",
	"get_telemetry",
]
