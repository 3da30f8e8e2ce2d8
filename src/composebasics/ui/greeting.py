# ---------------------------------------------------------------------------
# File: greeting.py
# ---------------------------------------------------------------------------
# Description:
#	Selectable "Hello <name>" label.
#
# Notes:
#	- Click toggles a retained bool (initially unselected).
#	- Background animates between transparent and red.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Dev Team				Initial coding / release
# 10/09/2026	Dev Team				Animate background via animate_color
# ---------------------------------------------------------------------------

from __future__ import annotations

from composebasics.runtime.animation import animate_color
from composebasics.runtime.color import RED, TRANSPARENT
from composebasics.runtime.composer import Scope
from composebasics.runtime.nodes import ViewNode, text


SELECTED_BACKGROUND = RED
UNSELECTED_BACKGROUND = TRANSPARENT

GREETING_PADDING = 18
GREETING_TYPOGRAPHY = "h3"


def greeting(scope: Scope, name: str) -> ViewNode:
	selected = scope.state("selected", False)
	background = animate_color(
		scope,
		SELECTED_BACKGROUND if selected.value else UNSELECTED_BACKGROUND,
	)

	return text(
		f"Hello {name}",
		typography=GREETING_TYPOGRAPHY,
		padding=GREETING_PADDING,
		background=background,
		on_click=lambda: selected.update(lambda s: not s),
	)
