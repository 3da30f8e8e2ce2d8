# ---------------------------------------------------------------------------
# File: nodes.py
# ---------------------------------------------------------------------------
# Description:
#	ViewNode: immutable description of one primitive UI element, plus the
#	builder functions composition functions use to emit them.
#
# Notes:
#	- Nodes are compared structurally. Event handlers are carried but are
#	  excluded from equality, so re-rendering unchanged state yields an
#	  equal tree even though handler closures are new objects.
#	- style is a sorted tuple of (name, value) pairs; None values are dropped.
#	- SLOT nodes only exist inside a scope's raw output; Composer.tree()
#	  replaces them with the child scope's output.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Dev Team				Initial coding / release
# 10/08/2026	Dev Team				Add lazy_column + on_scroll
# 10/12/2026	Dev Team				Add walk()/find_all() helpers for tests + renderer
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterator, Optional

from composebasics.runtime.color import Color


THEME = "theme"
SURFACE = "surface"
COLUMN = "column"
LAZY_COLUMN = "lazy_column"
TEXT = "text"
BUTTON = "button"
DIVIDER = "divider"
SLOT = "slot"

Style = tuple[tuple[str, Any], ...]
ClickHandler = Callable[[], Any]
ScrollHandler = Callable[[int], Any]


@dataclass(frozen=True, slots=True)
class ViewNode:
	kind: str
	text: str = ""
	style: Style = ()
	children: tuple["ViewNode", ...] = ()
	key: Optional[str] = None

	on_click: Optional[ClickHandler] = field(default=None, compare=False, repr=False)
	on_scroll: Optional[ScrollHandler] = field(default=None, compare=False, repr=False)

	def attr(self, name: str, default: Any = None) -> Any:
		for k, v in self.style:
			if k == name:
				return v
		return default

	@property
	def clickable(self) -> bool:
		return self.on_click is not None

	def with_children(self, children: tuple["ViewNode", ...]) -> "ViewNode":
		return replace(self, children=children)

	def walk(self) -> Iterator["ViewNode"]:
		"""
		Depth-first, pre-order.
		"""
		yield self
		for child in self.children:
			yield from child.walk()

	def find_all(self, kind: Optional[str] = None, text: Optional[str] = None) -> list["ViewNode"]:
		return [
			n for n in self.walk()
			if (kind is None or n.kind == kind) and (text is None or n.text == text)
		]

	def find(self, kind: Optional[str] = None, text: Optional[str] = None) -> Optional["ViewNode"]:
		for n in self.walk():
			if (kind is None or n.kind == kind) and (text is None or n.text == text):
				return n
		return None


def make_style(**attrs: Any) -> Style:
	return tuple(sorted((k, v) for k, v in attrs.items() if v is not None))


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def text(
	value: str,
	*,
	typography: Optional[str] = None,
	padding: Optional[int] = None,
	background: Optional[Color] = None,
	color: Optional[Color] = None,
	on_click: Optional[ClickHandler] = None,
) -> ViewNode:
	return ViewNode(
		TEXT,
		text=value,
		style=make_style(typography=typography, padding=padding, background=background, color=color),
		on_click=on_click,
	)


def button(
	label: str,
	on_click: ClickHandler,
	*,
	background: Optional[Color] = None,
	outlined: bool = False,
) -> ViewNode:
	return ViewNode(
		BUTTON,
		text=label,
		style=make_style(background=background, outlined=outlined or None),
		on_click=on_click,
	)


def divider(color: Color, *, thickness: int = 1) -> ViewNode:
	return ViewNode(DIVIDER, style=make_style(color=color, thickness=thickness))


def column(*children: ViewNode, fill_width: bool = False, fill_height: bool = False) -> ViewNode:
	return ViewNode(
		COLUMN,
		style=make_style(fill_width=fill_width or None, fill_height=fill_height or None),
		children=tuple(children),
	)


def surface(color: Color, *children: ViewNode) -> ViewNode:
	return ViewNode(SURFACE, style=make_style(background=color), children=tuple(children))


def slot(path: tuple[str, ...]) -> ViewNode:
	return ViewNode(SLOT, key="/".join(path), style=(("path", path),))
