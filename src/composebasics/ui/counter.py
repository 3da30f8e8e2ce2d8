# ---------------------------------------------------------------------------
# File: counter.py
# ---------------------------------------------------------------------------
# Description:
#	Click counters: one owning its state, one with the state hoisted.
#
# Notes:
#	- counter() keeps the count in its own scope; instances are independent.
#	- hoisted_counter() owns nothing. The caller holds the count and must
#	  recompose with the new value for the change to show.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Dev Team				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Callable

from composebasics.runtime.color import BLUE, RED
from composebasics.runtime.composer import Scope
from composebasics.runtime.nodes import ViewNode, button


# Counts above this switch the hoisted counter from blue to red.
HIGHLIGHT_ABOVE = 5


def click_label(count: int) -> str:
	return f"I've been clicked {count} times"


def counter(scope: Scope) -> ViewNode:
	count = scope.state("count", 0)

	return button(
		click_label(count.value),
		on_click=lambda: count.update(lambda n: n + 1),
		outlined=True,
	)


def hoisted_counter(scope: Scope, count: int, update_count: Callable[[int], None]) -> ViewNode:
	return button(
		click_label(count),
		on_click=lambda: update_count(count + 1),
		background=RED if count > HIGHLIGHT_ABOVE else BLUE,
		outlined=True,
	)
