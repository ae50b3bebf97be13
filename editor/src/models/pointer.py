"""Pointer input for the per-frame drag tick.

Qt delivers mouse presses and releases as events between frames. The
``PointerInput`` accumulator latches them as edge flags which the next
frame consumes through ``sample()``, so a press and release landing in the
same frame are both seen exactly once.
"""

from dataclasses import dataclass
from typing import Optional

from .transform import Vec2


@dataclass(frozen=True)
class PointerSample:
	"""Read-only pointer state for one tick.

	cursor: window pixel position (Y-down), None when outside the window
	viewport: viewport size in pixels, None when no viewport is available
	"""
	just_pressed: bool = False
	just_released: bool = False
	cursor: Optional[Vec2] = None
	viewport: Optional[Vec2] = None


class PointerInput:
	"""Latches left-button edges until the next frame samples them."""

	def __init__(self):
		self._just_pressed = False
		self._just_released = False
		self.held = False

	def press(self):
		if not self.held:
			self._just_pressed = True
		self.held = True

	def release(self):
		if self.held:
			self._just_released = True
		self.held = False

	def sample(self, cursor, viewport):
		"""Build the sample for this tick and clear the edge flags.

		A release followed by a new press within one frame leaves the button
		held, so only the press edge is reported.
		"""
		sample = PointerSample(self._just_pressed, self.release_pending, cursor, viewport)
		self.clear_edges()
		return sample

	@property
	def release_pending(self):
		"""True when a release is latched and the button is still up."""
		return self._just_released and not self.held

	def clear_edges(self):
		self._just_pressed = False
		self._just_released = False

	def reset(self):
		self.clear_edges()
		self.held = False
