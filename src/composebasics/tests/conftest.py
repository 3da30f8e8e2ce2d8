# ---------------------------------------------------------------------------
# File: conftest.py
# ---------------------------------------------------------------------------
# Description:
#	Shared pytest fixtures for composebasics.
#
# Notes:
#	- tk_root skips (not fails) when no display is available.
#	- composer uses an enabled Telemetry with a MemorySink so tests can
#	  count scope invocations.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Dev Team				Initial fixtures
# 10/13/2026	Dev Team				Add tk_root
# ---------------------------------------------------------------------------

from __future__ import annotations

import tkinter as tk

import pytest

from composebasics.core.telemetry import MemorySink, Telemetry
from composebasics.runtime.composer import Composer


@pytest.fixture
def sink() -> MemorySink:
	return MemorySink()


@pytest.fixture
def composer(sink: MemorySink) -> Composer:
	c = Composer(telemetry=Telemetry(enabled=True, sink=sink))
	yield c
	c.dispose()


@pytest.fixture
def tk_root():
	try:
		root = tk.Tk()
	except tk.TclError as ex:
		pytest.skip(f"Tk display not available: {ex}")

	root.withdraw()
	try:
		yield root
	finally:
		root.destroy()
