# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public app package surface for composebasics.
#
# Notes:
#   - Uses lazy exports so importing the package never pulls in Tk.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"App",
	"TkRenderer",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"App": ("composebasics.app.app", "App"),
	"TkRenderer": ("composebasics.app.renderer", "TkRenderer"),
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
	from composebasics.app.app import App
	from composebasics.app.renderer import TkRenderer
