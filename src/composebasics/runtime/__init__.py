# ---------------------------------------------------------------------------
# File: runtime/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public runtime package surface for composebasics.
#
# Notes:
#   - Uses lazy exports (PEP 562), same as the ui/app packages.
#   - Runtime modules import each other directly, never via this package.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	# State
	"MutableState", "StateStore", "mutable_state_of",

	# Composition
	"Composer", "Scope", "RecompositionError",

	# Nodes
	"ViewNode", "Color",

	# Animation + lists
	"FrameClock", "animate_color", "lazy_column", "LazyListState",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"MutableState": ("composebasics.runtime.state", "MutableState"),
	"StateStore": ("composebasics.runtime.state", "StateStore"),
	"mutable_state_of": ("composebasics.runtime.state", "mutable_state_of"),

	"Composer": ("composebasics.runtime.composer", "Composer"),
	"Scope": ("composebasics.runtime.composer", "Scope"),
	"RecompositionError": ("composebasics.runtime.composer", "RecompositionError"),

	"ViewNode": ("composebasics.runtime.nodes", "ViewNode"),
	"Color": ("composebasics.runtime.color", "Color"),

	"FrameClock": ("composebasics.runtime.animation", "FrameClock"),
	"animate_color": ("composebasics.runtime.animation", "animate_color"),
	"lazy_column": ("composebasics.runtime.lazy", "lazy_column"),
	"LazyListState": ("composebasics.runtime.lazy", "LazyListState"),
}


def __getattr__(name: str) -> Any:
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
	from composebasics.runtime.state import MutableState, StateStore, mutable_state_of
	from composebasics.runtime.composer import Composer, Scope, RecompositionError
	from composebasics.runtime.nodes import ViewNode
	from composebasics.runtime.color import Color
	from composebasics.runtime.animation import FrameClock, animate_color
	from composebasics.runtime.lazy import lazy_column, LazyListState
