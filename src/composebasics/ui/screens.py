# ---------------------------------------------------------------------------
# File: screens.py
# ---------------------------------------------------------------------------
# Description:
#	Sample screens + the themed app shell.
#
# Notes:
#	- screen_content:		two greetings split by a blue divider.
#	- screen_content_loop:	greetings in a loop + both counter variants.
#	- screen_content_list:	1000-row virtualized name list.
#	- my_app():				base theme + light gray surface around a screen.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	Dev Team				Initial coding / release
# 10/08/2026	Dev Team				Add screen_content_list
# 10/13/2026	Dev Team				Add SCREENS registry for the host
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Callable, Optional, Sequence

from composebasics.runtime.color import BLACK, BLUE, LIGHT_GRAY, RED
from composebasics.runtime.composer import Scope
from composebasics.runtime.lazy import DEFAULT_OVERSCAN_ROWS, DEFAULT_VIEWPORT_ROWS
from composebasics.runtime.nodes import ViewNode, column, divider, surface
from composebasics.ui.counter import counter, hoisted_counter
from composebasics.ui.greeting import greeting
from composebasics.ui.name_list import name_list
from composebasics.ui.theme import base_theme


DEFAULT_LOOP_NAMES: tuple[str, ...] = ("A", "B", "C", "D", "E")
DEFAULT_LIST_SIZE = 1000

SURFACE_COLOR = LIGHT_GRAY


def default_names(count: int = DEFAULT_LIST_SIZE) -> list[str]:
	return [f"User {i}" for i in range(count)]


def screen_content(scope: Scope) -> ViewNode:
	return column(
		scope.compose("mr", greeting, "Mr."),
		divider(BLUE),
		scope.compose("richard", greeting, "Richard Dewan"),
	)


def screen_content_loop(scope: Scope, names: Sequence[str] = DEFAULT_LOOP_NAMES) -> ViewNode:
	counter_state = scope.state("counter", 0)

	rows: list[ViewNode] = []
	for index, name in enumerate(names):
		rows.append(scope.compose(f"greeting.{index}", greeting, name))
		rows.append(divider(BLACK))

	return column(
		column(*rows, fill_width=True),
		divider(RED),
		scope.compose("counter", counter),
		divider(RED),
		scope.compose("hoisted_counter", hoisted_counter, counter_state.value, counter_state.set),
		fill_height=True,
	)


def screen_content_list(
	scope: Scope,
	names: Optional[Sequence[str]] = None,
	*,
	viewport_rows: int = DEFAULT_VIEWPORT_ROWS,
	overscan_rows: int = DEFAULT_OVERSCAN_ROWS,
) -> ViewNode:
	if names is None:
		names = default_names()

	return scope.compose(
		"name_list",
		name_list,
		names,
		viewport_rows=viewport_rows,
		overscan_rows=overscan_rows,
	)


def app_surface(scope: Scope, content: Callable[..., ViewNode], *args) -> ViewNode:
	return surface(SURFACE_COLOR, scope.compose("screen", content, *args))


def my_app(scope: Scope, content: Callable[..., ViewNode], *args, dark: bool = False) -> ViewNode:
	"""
	Themed app shell around content(scope, *args).
	"""
	return base_theme(scope, app_surface, content, *args, dark=dark)


SCREENS: dict[str, Callable[..., ViewNode]] = {
	"content": screen_content,
	"loop": screen_content_loop,
	"list": screen_content_list,
}


def get_screen(name: str) -> Callable[..., ViewNode]:
	try:
		return SCREENS[name]
	except KeyError as ex:
		raise KeyError(f"Unknown screen {name!r} (expected one of {sorted(SCREENS)})") from ex
