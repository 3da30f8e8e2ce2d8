# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public UI package surface for composebasics.
#
# Notes:
#   - Uses lazy exports to avoid circular imports (PEP 562).
#   - Do NOT import from composebasics.ui inside ui modules; import specific modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	# Theme
	"ThemeColors", "DARK_COLORS", "LIGHT_COLORS", "theme_colors", "base_theme",

	# Views
	"counter", "hoisted_counter", "greeting", "name_list",

	# Screens
	"screen_content", "screen_content_loop", "screen_content_list", "my_app",
	"SCREENS", "get_screen",
]

# Map public name -> (module, attribute)
_EXPORTS: dict[str, tuple[str, str]] = {
	"ThemeColors": ("composebasics.ui.theme", "ThemeColors"),
	"DARK_COLORS": ("composebasics.ui.theme", "DARK_COLORS"),
	"LIGHT_COLORS": ("composebasics.ui.theme", "LIGHT_COLORS"),
	"theme_colors": ("composebasics.ui.theme", "theme_colors"),
	"base_theme": ("composebasics.ui.theme", "base_theme"),

	"counter": ("composebasics.ui.counter", "counter"),
	"hoisted_counter": ("composebasics.ui.counter", "hoisted_counter"),
	"greeting": ("composebasics.ui.greeting", "greeting"),
	"name_list": ("composebasics.ui.name_list", "name_list"),

	"screen_content": ("composebasics.ui.screens", "screen_content"),
	"screen_content_loop": ("composebasics.ui.screens", "screen_content_loop"),
	"screen_content_list": ("composebasics.ui.screens", "screen_content_list"),
	"my_app": ("composebasics.ui.screens", "my_app"),
	"SCREENS": ("composebasics.ui.screens", "SCREENS"),
	"get_screen": ("composebasics.ui.screens", "get_screen"),
}

def __getattr__(name: str) -> Any:
	"""
	Lazy attribute resolver for composebasics.ui exports.
	"""
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from composebasics.ui.theme import ThemeColors, DARK_COLORS, LIGHT_COLORS, theme_colors, base_theme
	from composebasics.ui.counter import counter, hoisted_counter
	from composebasics.ui.greeting import greeting
	from composebasics.ui.name_list import name_list
	from composebasics.ui.screens import (
		screen_content, screen_content_loop, screen_content_list, my_app, SCREENS, get_screen,
	)
