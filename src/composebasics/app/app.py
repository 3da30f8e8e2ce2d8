# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#   Tk host window for composebasics.
#
# Notes:
#   - Owns the Composer (retained state, recomposition) and a TkRenderer.
#   - Every click/scroll goes through dispatch(): handler -> recompose ->
#     render. Nothing else mutates state.
#   - While animations run, a Tk after() loop advances the frame clock.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Dev Team				Initial coding / release
# 10/14/2026	Dev Team				Frame loop for animations
# 10/15/2026	Dev Team				show(screen) + config-driven list viewport
# ---------------------------------------------------------------------------

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Optional

import tkinter as tk
from tkinter import ttk

import ttkthemes as ttk_themes

from composebasics.app.renderer import TkRenderer
from composebasics.core.config import AppConfig
from composebasics.core.logging import get_app_logger, init_logging
from composebasics.core.telemetry import init_telemetry
from composebasics.runtime.composer import Composer
from composebasics.runtime.nodes import ViewNode
from composebasics.ui.screens import get_screen, my_app, screen_content_list


class App(tk.Tk):
	"""
	App

	Main window. Hosts one themed composition at a time.
	"""

	def __init__(
		self,
		width: int | None = None,
		height: int | None = None,
		title: str | None = None,
		cfg: dict[str, Any] | None = None,
	) -> None:
		super().__init__()

		self.cfg = AppConfig(cfg)

		init_logging(self.cfg)
		self._log = get_app_logger("host")
		self.telemetry = init_telemetry(self.cfg, logger=get_app_logger("telemetry"))

		self.title_text = title or str(self.cfg.get("title"))
		self.title(self.title_text)

		self.dark = bool(self.cfg.get("dark_theme", False))
		self.frame_ms = max(1, self.cfg.get_int("frame_ms", 16))

		# -------------------------------------------------------------------
		# Composition + rendering
		# -------------------------------------------------------------------

		self.composer = Composer(
			telemetry=self.telemetry,
			animation_ms=self.cfg.get_int("animation_ms", 300),
		)

		self.style = ttk_themes.ThemedStyle(self)

		# Ensure Tk has computed screen dimensions
		self.update_idletasks()

		self._apply_geometry(
			width if width is not None else self.cfg.get_int("width", 480),
			height if height is not None else self.cfg.get_int("height", 800),
		)

		self.root_frame = ttk.Frame(self)
		self.root_frame.pack(fill="both", expand=True)

		self.renderer = TkRenderer(self.root_frame, self.dispatch, style=self.style)

		self._frame_job: Optional[str] = None

	# -----------------------------------------------------------------------
	# Content
	# -----------------------------------------------------------------------

	def show(self, screen: str | None = None) -> ViewNode:
		"""
		Show a named screen ("content", "loop", "list"; default from cfg).
		"""
		name = screen or str(self.cfg.get("screen", "list"))
		content = get_screen(name)

		if content is screen_content_list:
			content = partial(
				screen_content_list,
				viewport_rows=self.cfg.get_int("viewport_rows", 10),
				overscan_rows=self.cfg.get_int("overscan_rows", 2),
			)

		self._log.info("show screen=%s dark=%s", name, self.dark)
		return self.set_content(content)

	def set_content(self, content: Callable[..., ViewNode], *args: Any) -> ViewNode:
		tree = self.composer.set_content(my_app, content, *args, dark=self.dark)
		self.renderer.render(tree)
		self._schedule_frame()
		return tree

	def dispatch(self, handler: Callable[..., Any], *args: Any) -> Any:
		"""
		Run an event handler and bring the window up to date.
		"""
		result = self.composer.dispatch(handler, *args)
		self.refresh()
		return result

	def refresh(self) -> None:
		self.composer.recompose()
		self.renderer.render(self.composer.tree())
		self._schedule_frame()

	# -----------------------------------------------------------------------
	# Frame loop
	# -----------------------------------------------------------------------

	def _schedule_frame(self) -> None:
		if self._frame_job is None and self.composer.clock.busy:
			self._frame_job = self.after(self.frame_ms, self._on_frame)

	def _on_frame(self) -> None:
		self._frame_job = None
		self.composer.clock.advance(self.frame_ms)
		self.refresh()

	# -----------------------------------------------------------------------
	# Window
	# -----------------------------------------------------------------------

	def _apply_geometry(self, width: int, height: int) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		win_w = max(1, min(width, screen_w))
		win_h = max(1, min(height, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		"""
		Run the Tk event loop.
		"""
		self.mainloop()

	def destroy(self) -> None:
		if self._frame_job is not None:
			self.after_cancel(self._frame_job)
			self._frame_job = None
		self.composer.dispose()
		super().destroy()

	def __str__(self) -> str:
		return f"{self.__class__.__name__}(title={self.title_text!r})"

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
