# ---------------------------------------------------------------------------
# File: name_list.py
# ---------------------------------------------------------------------------
# Description:
#	Scrollable list of greetings backed by lazy_column.
#
# Notes:
#	- Each row is a greeting followed by a red divider.
#	- Row selection is per row; scrolling a row out of the window resets it.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Dev Team				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional, Sequence

from composebasics.runtime.color import RED
from composebasics.runtime.composer import Scope
from composebasics.runtime.lazy import DEFAULT_OVERSCAN_ROWS, DEFAULT_VIEWPORT_ROWS, lazy_column
from composebasics.runtime.nodes import ViewNode, column, divider
from composebasics.ui.greeting import greeting


def name_row(scope: Scope, name: str) -> ViewNode:
	return column(
		scope.compose("greeting", greeting, name),
		divider(RED),
	)


def name_list(
	scope: Scope,
	names: Optional[Sequence[str]],
	*,
	viewport_rows: int = DEFAULT_VIEWPORT_ROWS,
	overscan_rows: int = DEFAULT_OVERSCAN_ROWS,
) -> ViewNode:
	return lazy_column(
		scope,
		names,
		name_row,
		viewport_rows=viewport_rows,
		overscan_rows=overscan_rows,
	)
