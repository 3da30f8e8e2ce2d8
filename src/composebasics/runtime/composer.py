# ---------------------------------------------------------------------------
# File: composer.py
# ---------------------------------------------------------------------------
# Description:
#	Composition runtime: scopes, dependency tracking and recomposition.
#
# Notes:
#	- A Scope is one logical instance of a composition function. Its path
#	  (parent path + key) is the stable identity retained state hangs off.
#	- Reading a tracked MutableState while a scope is composing subscribes
#	  that scope. Writing the state marks the scope dirty.
#	- recompose() re-invokes only dirty scopes, shallowest first. A child is
#	  skipped when its fn/args are unchanged and it is not dirty itself.
#	- Children not visited by a parent's invocation are disposed, and their
#	  retained state is forgotten.
#	- Scope output keeps SLOT placeholders for children; tree() resolves
#	  them, so a child can recompose without re-invoking its parent.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Dev Team				Initial coding / release
# 10/07/2026	Dev Team				Fine-grained invalidation via state subscriptions
# 10/09/2026	Dev Team				Skip unchanged children; telemetry counters
# 10/12/2026	Dev Team				Bound recompose passes (RecompositionError)
# 10/18/2026	Dev Team				Keep pending scopes queued when a composition raises
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from composebasics.core.logging import get_app_logger
from composebasics.core.telemetry import Telemetry, get_telemetry
from composebasics.runtime.animation import DEFAULT_DURATION_MS, FrameClock
from composebasics.runtime.nodes import SLOT, ViewNode, slot
from composebasics.runtime.state import MutableState, ScopePath, StateStore, observe_reads


T = TypeVar("T")

ComposeFn = Callable[..., ViewNode]

ROOT_KEY = "root"

# Upper bound on invalidate -> recompose rounds within one recompose() call.
MAX_RECOMPOSE_PASSES = 32


_log = get_app_logger("runtime.composer")


class RecompositionError(RuntimeError):
	"""
	Raised when recomposition keeps invalidating itself and never settles.
	"""


def _fn_name(fn: Any) -> str:
	inner = getattr(fn, "func", fn)
	return getattr(inner, "__qualname__", None) or repr(inner)


class Scope:
	"""
	Scope

	One instance of a composition function in the tree.

	Composition functions receive their Scope as the first argument and use:
	- state(slot, initial):		Retained, tracked MutableState.
	- remember(slot, factory):	Retained arbitrary object.
	- compose(key, fn, ...):	Invoke a child composition function.
	"""

	def __init__(
		self,
		composer: "Composer",
		path: ScopePath,
		fn: ComposeFn,
		args: tuple[Any, ...],
		kwargs: dict[str, Any],
		parent: Optional["Scope"] = None,
	) -> None:
		self.composer = composer
		self.path = path
		self.fn = fn
		self.args = args
		self.kwargs = kwargs
		self.parent = parent

		self.children: dict[str, Scope] = {}
		self.output: Optional[ViewNode] = None

		self.dirty = False
		self.disposed = False

		self._visited: set[str] = set()
		self._reads: set[MutableState[Any]] = set()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} path={'/'.join(self.path)!r} fn={_fn_name(self.fn)!r}>"

	@property
	def key(self) -> str:
		return self.path[-1]

	@property
	def depth(self) -> int:
		return len(self.path)

	@property
	def clock(self) -> FrameClock:
		return self.composer.clock

	# -----------------------------------------------------------------------
	# Retained state
	# -----------------------------------------------------------------------

	def remember(self, slot_name: str, factory: Callable[[], T]) -> T:
		self._check_alive()
		return self.composer.store.remember(self.path, slot_name, factory)

	def state(self, slot_name: str, initial: T) -> MutableState[T]:
		self._check_alive()
		return self.composer.store.remember_state(self.path, slot_name, initial)

	# -----------------------------------------------------------------------
	# Children
	# -----------------------------------------------------------------------

	def compose(self, key: Any, fn: ComposeFn, *args: Any, **kwargs: Any) -> ViewNode:
		"""
		Compose fn as the child identified by key and return its slot.

		Keys must be unique among the children visited in one invocation.
		"""
		self._check_alive()

		if not self.composer._tracking or self.composer._tracking[-1] is not self:
			raise RuntimeError(f"compose() called outside of {self!r} composition")

		key = str(key)
		if key in self._visited:
			raise ValueError(f"Duplicate child key {key!r} under {'/'.join(self.path)!r}")
		self._visited.add(key)

		child = self.children.get(key)
		if child is None:
			child = Scope(self.composer, self.path + (key,), fn, args, kwargs, parent=self)
			self.children[key] = child
			self.composer._scopes[child.path] = child
		elif (
			not child.dirty
			and child.output is not None
			and child.fn is fn
			and child.args == args
			and child.kwargs == kwargs
		):
			return slot(child.path)
		else:
			child.fn, child.args, child.kwargs = fn, args, kwargs

		self.composer._invoke(child)
		return slot(child.path)

	def invalidate(self) -> None:
		self.composer._invalidate(self)

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _on_state_changed(self, state: MutableState[Any]) -> None:
		self.composer._invalidate(self)

	def _check_alive(self) -> None:
		if self.disposed:
			raise RuntimeError(f"Scope disposed: {'/'.join(self.path)!r}")


class Composer:
	"""
	Composer

	Owns the scope tree, the retained state store and the frame clock.
	"""

	def __init__(
		self,
		*,
		telemetry: Optional[Telemetry] = None,
		clock: Optional[FrameClock] = None,
		animation_ms: int = DEFAULT_DURATION_MS,
	) -> None:
		self.telemetry = telemetry or get_telemetry()
		self.clock = clock or FrameClock()
		self.animation_ms = animation_ms

		self.store = StateStore(write_hook=self._on_write)
		self.root: Optional[Scope] = None

		self._scopes: dict[ScopePath, Scope] = {}
		self._tracking: list[Scope] = []
		self._dirty: set[Scope] = set()

	# -----------------------------------------------------------------------
	# Public API
	# -----------------------------------------------------------------------

	def set_content(self, fn: ComposeFn, *args: Any, **kwargs: Any) -> ViewNode:
		"""
		Replace the root composition and return the resolved tree.
		"""
		if self.root is not None:
			self._dispose(self.root)

		self.root = Scope(self, (ROOT_KEY,), fn, args, kwargs)
		self._scopes[self.root.path] = self.root
		self._invoke(self.root)
		return self.tree()

	def tree(self) -> ViewNode:
		if self.root is None or self.root.output is None:
			raise RuntimeError("Composer has no content (call set_content first)")
		return self._resolve(self.root)

	@property
	def has_changes(self) -> bool:
		return bool(self._dirty)

	def recompose(self) -> bool:
		"""
		Re-invoke dirty scopes until none remain. Returns True if any ran.
		"""
		if not self._dirty:
			return False

		with self.telemetry.timer("recompose.duration_ms"):
			passes = 0
			while self._dirty:
				passes += 1
				if passes > MAX_RECOMPOSE_PASSES:
					raise RecompositionError(
						f"Recomposition did not settle after {MAX_RECOMPOSE_PASSES} passes: "
						f"{sorted('/'.join(s.path) for s in self._dirty)}"
					)

				# Scopes leave _dirty one at a time, so an exception keeps the rest queued.
				pending = sorted(self._dirty, key=lambda s: s.depth)

				for scope in pending:
					if scope.disposed or not scope.dirty:
						self._dirty.discard(scope)
						continue
					self._invoke(scope)

		return True

	def dispatch(self, handler: Callable[..., Any], *args: Any) -> Any:
		"""
		Run an event handler, then recompose.
		"""
		result = handler(*args)
		self.recompose()
		return result

	def advance_frame(self, ms: float) -> bool:
		"""
		Advance the frame clock (running animations), then recompose.
		"""
		self.clock.advance(ms)
		return self.recompose()

	def scope(self, path: ScopePath) -> Optional[Scope]:
		return self._scopes.get(tuple(path))

	def dispose(self) -> None:
		if self.root is not None:
			self._dispose(self.root)
			self.root = None
		self._dirty.clear()

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _invoke(self, scope: Scope) -> None:
		for state in scope._reads:
			state.unsubscribe(scope._on_state_changed)
		scope._reads.clear()
		scope._visited = set()

		scope.dirty = False
		self._dirty.discard(scope)

		self.telemetry.counter("compose.invoke", attrs={"fn": _fn_name(scope.fn), "path": "/".join(scope.path)})

		self._tracking.append(scope)
		try:
			with observe_reads(self._on_read):
				node = scope.fn(scope, *scope.args, **scope.kwargs)

			if not isinstance(node, ViewNode):
				raise TypeError(
					f"Composition function {_fn_name(scope.fn)} returned "
					f"{type(node).__name__}, expected ViewNode"
				)
		except Exception:
			# Retried by the next recompose().
			self._invalidate(scope)
			raise
		finally:
			self._tracking.pop()

		for key in [k for k in scope.children if k not in scope._visited]:
			self._dispose(scope.children.pop(key))

		scope.output = node

	def _dispose(self, scope: Scope) -> None:
		for child in list(scope.children.values()):
			self._dispose(child)
		scope.children.clear()

		for state in scope._reads:
			state.unsubscribe(scope._on_state_changed)
		scope._reads.clear()

		self.store.forget(scope.path)
		self._scopes.pop(scope.path, None)
		self._dirty.discard(scope)
		scope.disposed = True
		scope.output = None

		self.telemetry.counter("compose.dispose", attrs={"fn": _fn_name(scope.fn), "path": "/".join(scope.path)})
		_log.debug("dispose %s", "/".join(scope.path))

	def _invalidate(self, scope: Scope) -> None:
		if scope.disposed or scope.dirty:
			return
		scope.dirty = True
		self._dirty.add(scope)
		_log.debug("invalidate %s", "/".join(scope.path))

	def _on_read(self, state: MutableState[Any]) -> None:
		if not self._tracking:
			return
		scope = self._tracking[-1]
		if state not in scope._reads:
			scope._reads.add(state)
			state.subscribe(scope._on_state_changed)

	def _on_write(self, state: MutableState[Any]) -> None:
		self.telemetry.counter("state.write")

	def _resolve(self, scope: Scope) -> ViewNode:
		if scope.output is None:
			raise RuntimeError(f"Scope has no output: {'/'.join(scope.path)!r}")
		return self._resolve_node(scope.output)

	def _resolve_node(self, node: ViewNode) -> ViewNode:
		if node.kind == SLOT:
			child = self._scopes[node.attr("path")]
			return self._resolve(child)

		if not node.children:
			return node

		return node.with_children(tuple(self._resolve_node(c) for c in node.children))
