# ---------------------------------------------------------------------------
# File: lazy.py
# ---------------------------------------------------------------------------
# Description:
#	Virtualized vertical list (lazy column) for composebasics.
#
# Notes:
#	- Only rows in [first - overscan, first + viewport + overscan) are
#	  composed. Rows that fall out of that window are disposed together with
#	  their retained state, and recreated when scrolled back in.
#	- Scroll position is retained per lazy column instance (LazyListState).
#	- A None items sequence renders as an empty list.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Dev Team				Initial coding / release
# 10/11/2026	Dev Team				Clamp scrolling to the last full viewport
# 10/18/2026	Dev Team				Index the caller's sequence instead of copying it
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

from composebasics.runtime.nodes import LAZY_COLUMN, ViewNode, make_style
from composebasics.runtime.state import MutableState

if TYPE_CHECKING:
	from composebasics.runtime.composer import Scope


DEFAULT_VIEWPORT_ROWS = 10
DEFAULT_OVERSCAN_ROWS = 2


class LazyListState:
	"""
	LazyListState

	Scroll position of one lazy column, in rows.
	"""

	def __init__(self, first_visible: MutableState[int], viewport_rows: int) -> None:
		self._first_visible = first_visible
		self.viewport_rows = viewport_rows
		self.item_count = 0

	@property
	def first_visible_index(self) -> int:
		return self._first_visible.value

	@property
	def max_first_index(self) -> int:
		return max(0, self.item_count - self.viewport_rows)

	def scroll_to(self, index: int) -> None:
		self._first_visible.set(max(0, min(int(index), self.max_first_index)))

	def scroll_by(self, delta: int) -> None:
		self.scroll_to(self._first_visible.peek() + int(delta))

	def window(self, overscan_rows: int) -> range:
		"""
		Indices to materialize for the current position.
		"""
		first = min(self._first_visible.peek(), self.max_first_index)
		lo = max(0, first - overscan_rows)
		hi = min(self.item_count, first + self.viewport_rows + overscan_rows)
		return range(lo, hi)


def lazy_column(
	scope: "Scope",
	items: Optional[Sequence[Any]],
	item_content: Callable[..., ViewNode],
	*,
	viewport_rows: int = DEFAULT_VIEWPORT_ROWS,
	overscan_rows: int = DEFAULT_OVERSCAN_ROWS,
	key_fn: Optional[Callable[[int, Any], Any]] = None,
) -> ViewNode:
	"""
	Compose item_content(scope, item) for the visible window of items.

	Rows are keyed by index unless key_fn(index, item) is given.
	"""
	# Only window rows are indexed; items is never copied or iterated.
	if items is None:
		items = ()
	viewport_rows = max(1, int(viewport_rows))
	overscan_rows = max(0, int(overscan_rows))

	first_visible = scope.state("lazy.first_visible", 0)
	list_state = scope.remember("lazy.list_state", lambda: LazyListState(first_visible, viewport_rows))
	list_state.viewport_rows = viewport_rows
	list_state.item_count = len(items)

	# Tracked read: scrolling recomposes this scope only.
	first = min(list_state.first_visible_index, list_state.max_first_index)

	rows = []
	for index in list_state.window(overscan_rows):
		item = items[index]
		key = key_fn(index, item) if key_fn is not None else index
		rows.append(scope.compose(key, item_content, item))

	return ViewNode(
		LAZY_COLUMN,
		style=make_style(
			first_visible=first,
			item_count=len(items),
			viewport_rows=viewport_rows,
		),
		children=tuple(rows),
		on_scroll=list_state.scroll_by,
	)
