# ---------------------------------------------------------------------------
# File: test_nodes.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for ViewNode + builders and Color.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Dev Team				Initial tests
# 10/09/2026	Dev Team				Color lerp / composite tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from composebasics.runtime.color import BLUE, RED, TRANSPARENT, WHITE, Color
from composebasics.runtime.nodes import (
	COLUMN,
	DIVIDER,
	TEXT,
	ViewNode,
	button,
	column,
	divider,
	make_style,
	text,
)


def test_nodes_compare_structurally_ignoring_handlers():
	a = text("Hello", padding=18, on_click=lambda: 1)
	b = text("Hello", padding=18, on_click=lambda: 2)

	assert a == b
	assert hash(a) == hash(b)
	assert a != text("Hello", padding=4)


def test_make_style_sorts_and_drops_none():
	style = make_style(padding=18, background=None, color=RED)

	assert style == (("color", RED), ("padding", 18))


def test_button_style_and_click():
	node = button("Go", on_click=lambda: "clicked", background=BLUE, outlined=True)

	assert node.attr("background") == BLUE
	assert node.attr("outlined") is True
	assert node.clickable is True
	assert node.on_click() == "clicked"


def test_walk_and_find():
	tree = column(
		text("A"),
		divider(RED),
		column(text("B")),
	)

	kinds = [n.kind for n in tree.walk()]
	assert kinds == [COLUMN, TEXT, DIVIDER, COLUMN, TEXT]

	assert [n.text for n in tree.find_all(kind=TEXT)] == ["A", "B"]
	assert tree.find(text="B") is not None
	assert tree.find(text="missing") is None
	assert tree.find(kind=DIVIDER).attr("color") == RED


def test_viewnode_is_immutable():
	node = ViewNode(TEXT, text="x")

	with pytest.raises(AttributeError):
		node.text = "y"  # type: ignore[misc]


def test_color_hex_round_trip_and_channels():
	c = Color.from_hex("#CE93D8")

	assert c == Color(0xFFCE93D8)
	assert c.hex == "#CE93D8"
	assert (c.alpha, c.red, c.green, c.blue) == (0xFF, 0xCE, 0x93, 0xD8)
	assert Color.from_hex("#00000000").is_transparent


def test_color_rejects_bad_input():
	with pytest.raises(ValueError):
		Color(0x1_0000_0000)

	with pytest.raises(ValueError):
		Color.from_hex("#abc")


def test_color_lerp_endpoints_and_midpoint():
	assert TRANSPARENT.lerp(RED, 0.0) == TRANSPARENT
	assert TRANSPARENT.lerp(RED, 1.0) == RED

	mid = TRANSPARENT.lerp(RED, 0.5)
	assert mid not in (TRANSPARENT, RED)
	assert 0 < mid.alpha < 0xFF


def test_color_composite_over_background():
	assert TRANSPARENT.composite_over(WHITE) == WHITE
	assert RED.composite_over(WHITE) == RED

	half_red = Color.from_channels(0x80, 0xFF, 0x00, 0x00)
	flat = half_red.composite_over(WHITE)
	assert flat.alpha == 0xFF
	assert flat.red == 0xFF
	assert 0 < flat.green < 0xFF
