# ---------------------------------------------------------------------------
# File: renderer.py
# ---------------------------------------------------------------------------
# Description:
#	TkRenderer: reconciles ViewNode trees into Tk widgets.
#
# Notes:
#	- Children are matched by position. Same kind + key => the widget is
#	  kept and reconfigured only if its own text/style (or inherited background)
#	  changed; otherwise the old widget is destroyed and a new one built.
#	- Handlers are looked up on the latest node at event time, so closures
#	  refreshed by recomposition are always the ones invoked.
#	- Transparent / translucent backgrounds are flattened onto the
#	  inherited background (Tk has no alpha).
#	- The theme node switches the ttkthemes style (light: arc, dark: equilux).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Dev Team				Initial coding / release
# 10/14/2026	Dev Team				Lazy column scrollbar + mousewheel routing
# 10/16/2026	Dev Team				Skip reconfigure when only descendants changed
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import tkinter as tk
from tkinter import ttk

from composebasics.core.logging import get_app_logger
from composebasics.runtime.color import WHITE, Color
from composebasics.runtime import nodes as n
from composebasics.runtime.nodes import ViewNode


LIGHT_TTK_THEME = "arc"
DARK_TTK_THEME = "equilux"

DARK_BACKGROUND = Color(0xFF121212)

FONT_FAMILY = "TkDefaultFont"
TYPOGRAPHY: dict[Optional[str], tuple[str, int]] = {
	None: (FONT_FAMILY, 11),
	"body": (FONT_FAMILY, 11),
	"h3": (FONT_FAMILY, 28),
}

# Mousewheel notches -> rows.
WHEEL_ROWS = 3

Dispatch = Callable[..., Any]


_log = get_app_logger("host.renderer")


def _props_changed(old: ViewNode, new: ViewNode) -> bool:
	# Children are reconciled separately.
	return old.text != new.text or old.style != new.style


@dataclass(eq=False)
class MountedNode:
	node: ViewNode
	widget: tk.Widget
	background: Color
	inner: Optional[tk.Widget] = None
	scrollbar: Optional[ttk.Scrollbar] = None
	children: list["MountedNode"] = field(default_factory=list)

	@property
	def container(self) -> tk.Widget:
		return self.inner if self.inner is not None else self.widget


class TkRenderer:
	"""
	TkRenderer

	render(tree) brings the widget tree under parent in line with tree.
	"""

	def __init__(
		self,
		parent: tk.Misc,
		dispatch: Dispatch,
		*,
		style: Any = None,
	) -> None:
		self.parent = parent
		self._dispatch = dispatch
		self._style = style

		self.root: Optional[MountedNode] = None
		self.primary: Optional[Color] = None
		self.ttk_theme: Optional[str] = None

		# Widget churn counters (useful in tests + debugging).
		self.created = 0
		self.updated = 0

	def render(self, tree: ViewNode) -> None:
		self.root = self._reconcile(self.root, tree, self.parent, WHITE)
		if self.root.widget.winfo_manager() == "":
			self._pack(self.root)

	def destroy(self) -> None:
		if self.root is not None:
			self.root.widget.destroy()
			self.root = None

	# -----------------------------------------------------------------------
	# Reconciliation
	# -----------------------------------------------------------------------

	def _reconcile(
		self,
		mounted: Optional[MountedNode],
		node: ViewNode,
		parent: tk.Misc,
		inherited: Color,
	) -> MountedNode:
		if mounted is not None and mounted.node.kind == node.kind and mounted.node.key == node.key:
			if _props_changed(mounted.node, node) or mounted.background != inherited:
				self._configure(mounted, node, inherited)
				self.updated += 1
			mounted.node = node
		else:
			if mounted is not None:
				mounted.widget.destroy()
			mounted = self._create(node, parent, inherited)

		child_bg = self._child_background(node, inherited)

		old = mounted.children
		new: list[MountedNode] = []
		for index, child in enumerate(node.children):
			prev = old[index] if index < len(old) else None
			new.append(self._reconcile(prev, child, mounted.container, child_bg))

		for extra in old[len(node.children):]:
			extra.widget.destroy()

		if [c.widget for c in new] != [c.widget for c in old]:
			for c in new:
				c.widget.pack_forget()
			for c in new:
				self._pack(c)

		mounted.children = new
		return mounted

	def _create(self, node: ViewNode, parent: tk.Misc, inherited: Color) -> MountedNode:
		kind = node.kind

		if kind in (n.THEME, n.SURFACE, n.COLUMN, n.DIVIDER):
			widget: tk.Widget = tk.Frame(parent)
			mounted = MountedNode(node, widget, inherited)

		elif kind == n.LAZY_COLUMN:
			widget = tk.Frame(parent)
			inner = tk.Frame(widget)
			scrollbar = ttk.Scrollbar(widget, orient="vertical")
			scrollbar.pack(side="right", fill="y")
			inner.pack(side="left", fill="both", expand=True)
			mounted = MountedNode(node, widget, inherited, inner=inner, scrollbar=scrollbar)

			scrollbar.configure(command=lambda *args, m=mounted: self._on_scrollbar(m, *args))
			for w in (widget, inner):
				w.bind("<MouseWheel>", lambda e, m=mounted: self._on_wheel(m, e))
				w.bind("<Button-4>", lambda e, m=mounted: self._scroll(m, -WHEEL_ROWS))
				w.bind("<Button-5>", lambda e, m=mounted: self._scroll(m, WHEEL_ROWS))

		elif kind == n.TEXT:
			widget = tk.Label(parent, anchor="w")
			mounted = MountedNode(node, widget, inherited)
			widget.bind("<Button-1>", lambda e, m=mounted: self._click(m))

		elif kind == n.BUTTON:
			widget = tk.Button(parent)
			mounted = MountedNode(node, widget, inherited)
			widget.configure(command=lambda m=mounted: self._click(m))

		else:
			raise ValueError(f"Unsupported node kind: {kind!r}")

		self._configure(mounted, node, inherited)
		self.created += 1
		return mounted

	def _configure(self, mounted: MountedNode, node: ViewNode, inherited: Color) -> None:
		mounted.background = inherited
		widget = mounted.widget
		kind = node.kind

		if kind == n.THEME:
			self.primary = node.attr("primary")
			self._apply_ttk_theme(bool(node.attr("dark", False)))
			widget.configure(bg=self._child_background(node, inherited).hex)

		elif kind == n.SURFACE:
			widget.configure(bg=self._background(node, inherited).hex)

		elif kind in (n.COLUMN, n.LAZY_COLUMN):
			widget.configure(bg=inherited.hex)
			if mounted.inner is not None:
				mounted.inner.configure(bg=inherited.hex)
			if mounted.scrollbar is not None:
				mounted.scrollbar.set(*self._scroll_fractions(node))

		elif kind == n.DIVIDER:
			color = node.attr("color") or inherited
			widget.configure(bg=color.hex, height=int(node.attr("thickness", 1)))

		elif kind == n.TEXT:
			padding = int(node.attr("padding", 0))
			fg = node.attr("color")
			widget.configure(
				text=node.text,
				font=TYPOGRAPHY.get(node.attr("typography"), TYPOGRAPHY[None]),
				bg=self._background(node, inherited).hex,
				fg=fg.hex if fg is not None else "black",
				padx=padding,
				pady=padding,
				cursor="hand2" if node.clickable else "",
			)

		elif kind == n.BUTTON:
			bg = self._background(node, inherited)
			fg = WHITE if node.attr("background") is not None else (self.primary or WHITE)
			widget.configure(
				text=node.text,
				bg=bg.hex,
				activebackground=bg.hex,
				fg=fg.hex,
				relief="groove" if node.attr("outlined") else "raised",
			)

	def _pack(self, mounted: MountedNode) -> None:
		kind = mounted.node.kind
		widget = mounted.widget

		if kind in (n.THEME, n.SURFACE, n.LAZY_COLUMN):
			widget.pack(fill="both", expand=True)
		elif kind == n.COLUMN:
			if mounted.node.attr("fill_height"):
				widget.pack(fill="both", expand=True)
			else:
				widget.pack(fill="x")
		elif kind == n.DIVIDER:
			widget.pack(fill="x")
		else:
			widget.pack(anchor="w")

	# -----------------------------------------------------------------------
	# Colors
	# -----------------------------------------------------------------------

	def _background(self, node: ViewNode, inherited: Color) -> Color:
		bg: Optional[Color] = node.attr("background")
		if bg is None or bg.is_transparent:
			return inherited
		if bg.alpha < 0xFF:
			return bg.composite_over(inherited)
		return bg

	def _child_background(self, node: ViewNode, inherited: Color) -> Color:
		if node.kind == n.THEME:
			return DARK_BACKGROUND if node.attr("dark") else WHITE
		if node.kind == n.SURFACE:
			return self._background(node, inherited)
		return inherited

	def _apply_ttk_theme(self, dark: bool) -> None:
		name = DARK_TTK_THEME if dark else LIGHT_TTK_THEME
		if self._style is None or self.ttk_theme == name:
			return
		self._style.set_theme(name)
		self.ttk_theme = name
		_log.debug("ttk theme -> %s", name)

	# -----------------------------------------------------------------------
	# Events
	# -----------------------------------------------------------------------

	def _click(self, mounted: MountedNode) -> None:
		handler = mounted.node.on_click
		if handler is not None:
			self._dispatch(handler)

	def _scroll(self, mounted: MountedNode, delta: int) -> None:
		handler = mounted.node.on_scroll
		if handler is not None and delta:
			self._dispatch(handler, delta)

	def _on_wheel(self, mounted: MountedNode, event: tk.Event) -> None:
		delta = getattr(event, "delta", 0)
		if delta:
			self._scroll(mounted, WHEEL_ROWS if delta < 0 else -WHEEL_ROWS)

	def _on_scrollbar(self, mounted: MountedNode, *args: str) -> None:
		"""
		ttk.Scrollbar command: ("moveto", fraction) or ("scroll", n, "units"|"pages").
		"""
		node = mounted.node
		first = int(node.attr("first_visible", 0))
		count = int(node.attr("item_count", 0))
		viewport = int(node.attr("viewport_rows", 1))

		if not args:
			return

		if args[0] == "moveto":
			target = round(float(args[1]) * count)
			self._scroll(mounted, target - first)
		elif args[0] == "scroll":
			steps = int(args[1])
			if len(args) > 2 and args[2] == "pages":
				steps *= viewport
			self._scroll(mounted, steps)

	@staticmethod
	def _scroll_fractions(node: ViewNode) -> tuple[float, float]:
		count = int(node.attr("item_count", 0))
		if count <= 0:
			return (0.0, 1.0)
		first = int(node.attr("first_visible", 0))
		viewport = int(node.attr("viewport_rows", count))
		return (first / count, min(1.0, (first + viewport) / count))
