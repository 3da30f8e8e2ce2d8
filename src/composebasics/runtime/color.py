# ---------------------------------------------------------------------------
# File: color.py
# ---------------------------------------------------------------------------
# Description:
#	ARGB color value used by view nodes, themes and animations.
#
# Notes:
#	- Stored as a single 32-bit int (0xAARRGGBB), immutable and hashable.
#	- Tk has no alpha; composite_over() flattens onto a background.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Dev Team				Initial coding / release
# 10/09/2026	Dev Team				Add lerp() + composite_over() for color animation
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Color:
	argb: int

	def __post_init__(self) -> None:
		if not 0 <= self.argb <= 0xFFFFFFFF:
			raise ValueError(f"ARGB value out of range: {self.argb!r}")

	def __repr__(self) -> str:
		return f"Color(0x{self.argb:08X})"

	@classmethod
	def from_channels(cls, alpha: int, red: int, green: int, blue: int) -> "Color":
		return cls((alpha << 24) | (red << 16) | (green << 8) | blue)

	@classmethod
	def from_hex(cls, value: str) -> "Color":
		"""
		Parse "#RRGGBB" (opaque) or "#AARRGGBB".
		"""
		digits = value.lstrip("#")
		if len(digits) == 6:
			return cls(0xFF000000 | int(digits, 16))
		if len(digits) == 8:
			return cls(int(digits, 16))
		raise ValueError(f"Unsupported color literal: {value!r}")

	@property
	def alpha(self) -> int:
		return (self.argb >> 24) & 0xFF

	@property
	def red(self) -> int:
		return (self.argb >> 16) & 0xFF

	@property
	def green(self) -> int:
		return (self.argb >> 8) & 0xFF

	@property
	def blue(self) -> int:
		return self.argb & 0xFF

	@property
	def is_transparent(self) -> bool:
		return self.alpha == 0

	@property
	def hex(self) -> str:
		"""
		"#RRGGBB" (alpha dropped), the form Tk accepts.
		"""
		return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

	def lerp(self, other: "Color", fraction: float) -> "Color":
		if fraction <= 0.0:
			return self
		if fraction >= 1.0:
			return other

		def mix(a: int, b: int) -> int:
			return max(0, min(255, round(a + (b - a) * fraction)))

		return Color.from_channels(
			mix(self.alpha, other.alpha),
			mix(self.red, other.red),
			mix(self.green, other.green),
			mix(self.blue, other.blue),
		)

	def composite_over(self, background: "Color") -> "Color":
		"""
		Flatten this color onto an opaque background.
		"""
		a = self.alpha / 255.0

		def over(fg: int, bg: int) -> int:
			return round(fg * a + bg * (1.0 - a))

		return Color.from_channels(
			0xFF,
			over(self.red, background.red),
			over(self.green, background.green),
			over(self.blue, background.blue),
		)


TRANSPARENT = Color(0x00000000)
BLACK = Color(0xFF000000)
WHITE = Color(0xFFFFFFFF)
RED = Color(0xFFFF0000)
BLUE = Color(0xFF0000FF)
LIGHT_GRAY = Color(0xFFCCCCCC)
