# ---------------------------------------------------------------------------
# File: theme.py
# ---------------------------------------------------------------------------
# Description:
#	Theme colors + base_theme composition for composebasics.
#
# Notes:
#	- Exactly two fixed palettes; theme_colors(dark) is a pure selector.
#	- The dark flag is always passed in by the caller (no system lookup).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Dev Team				Initial coding / release
# 10/13/2026	Dev Team				Carry palette roles on the theme node for the Tk host
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from composebasics.runtime.color import Color
from composebasics.runtime.composer import Scope
from composebasics.runtime.nodes import THEME, ViewNode, make_style


PURPLE_200 = Color(0xFFCE93D8)
PURPLE_500 = Color(0xFF9C27B0)
PURPLE_700 = Color(0xFF7B1FA2)
TEAL_200 = Color(0xFF80CBC4)
GRAY_200 = Color(0xFFEEEEEE)
GRAY_900 = Color(0xFF212121)


@dataclass(frozen=True, slots=True)
class ThemeColors:
	primary: Color
	primary_variant: Color
	secondary: Color
	is_light: bool


DARK_COLORS = ThemeColors(
	primary=GRAY_200,
	primary_variant=GRAY_900,
	secondary=GRAY_900,
	is_light=False,
)

LIGHT_COLORS = ThemeColors(
	primary=PURPLE_500,
	primary_variant=PURPLE_700,
	secondary=TEAL_200,
	is_light=True,
)


def theme_colors(dark: bool) -> ThemeColors:
	return DARK_COLORS if dark else LIGHT_COLORS


def base_theme(
	scope: Scope,
	content: Callable[..., ViewNode],
	*args: Any,
	dark: bool = False,
) -> ViewNode:
	"""
	Wrap content in a theme node carrying the selected palette.
	"""
	colors = theme_colors(dark)

	return ViewNode(
		THEME,
		style=make_style(
			dark=dark,
			primary=colors.primary,
			primary_variant=colors.primary_variant,
			secondary=colors.secondary,
		),
		children=(scope.compose("content", content, *args),),
	)
