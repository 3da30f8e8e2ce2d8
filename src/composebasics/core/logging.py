# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for composebasics (stdlib logging).
#
# Notes:
#	- No Tk dependencies; safe to call before the host window exists.
#	- init_logging() is idempotent: it only reconfigures when the settings
#	  signature changes, so repeated calls never stack handlers.
#
#	cfg keys:
#		log_level		(default: "INFO")
#		log_console		(default: True)
#		log_file		(default: None)
#		log_format		(default: "%(asctime)s [%(levelname)s] %(name)s: %(message)s")
#		log_datefmt		(default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	Dev Team				Initial coding / release
# 10/08/2026	Dev Team				Accept AppConfig or plain dict
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


APP_LOGGER_BASE = "composebasics.app"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

_SIGNATURE: tuple[Any, ...] | None = None
_HANDLERS: list[logging.Handler] = []


def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_app_logger(area: str | None = None) -> logging.Logger:
	"""
	Return a logger namespaced under composebasics.app.

	Examples:
		get_app_logger()						-> composebasics.app
		get_app_logger("runtime.composer")	-> composebasics.app.runtime.composer
	"""
	if area:
		return logging.getLogger(f"{APP_LOGGER_BASE}.{area}")
	return logging.getLogger(APP_LOGGER_BASE)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Configure the root logger from cfg (AppConfig, dict, or None).
	"""
	global _SIGNATURE

	level = _coerce_level(_cfg_get(cfg, "log_level", "INFO"))
	console = bool(_cfg_get(cfg, "log_console", True))
	log_file = _cfg_get(cfg, "log_file", None)
	fmt = str(_cfg_get(cfg, "log_format", None) or DEFAULT_FORMAT)
	datefmt = str(_cfg_get(cfg, "log_datefmt", None) or DEFAULT_DATEFMT)

	signature = (level, console, str(log_file) if log_file else None, fmt, datefmt)
	if _SIGNATURE == signature:
		return

	root = logging.getLogger()
	root.setLevel(level)

	# Only remove what we installed; leave foreign handlers (pytest caplog) alone.
	for h in _HANDLERS:
		root.removeHandler(h)
		h.close()
	_HANDLERS.clear()

	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console:
		_HANDLERS.append(logging.StreamHandler())

	if log_file:
		parent = os.path.dirname(os.path.abspath(str(log_file)))
		os.makedirs(parent, exist_ok=True)
		_HANDLERS.append(logging.FileHandler(str(log_file), mode="a", encoding="utf-8"))

	for h in _HANDLERS:
		h.setLevel(level)
		h.setFormatter(formatter)
		root.addHandler(h)

	_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _cfg_get(cfg: Any | None, key: str, default: Any = None) -> Any:
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if callable(getter):
		return getter(key, default)

	return default


def _coerce_level(level: Any) -> int:
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = logging.getLevelName(val)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


def _reset_logging_for_tests() -> None:
	"""
	Remove installed handlers and forget the signature (unit tests only).
	"""
	global _SIGNATURE

	root = logging.getLogger()
	for h in _HANDLERS:
		root.removeHandler(h)
		h.close()
	_HANDLERS.clear()
	_SIGNATURE = None
