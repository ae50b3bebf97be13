"""Coordinate transformation utilities for the editor canvas.

Provides conversion between the pointer space and each draggable
element's own layout space:
- Pointer / window pixels (top-left origin, Y-down)
- Pixel layout (top-left origin, Y-down, anchor = top-left corner)
- World layout (viewport-center origin, Y-up, anchor = center)

Every space is described by an AnchorConvention and converted with a
single affine routine:

	local = axis_sign * (pointer - origin)
"""

from models.anchor import AnchorConvention, ORIGIN_TOP_LEFT, ORIGIN_VIEWPORT_CENTER
from models.transform import Rect, Vec2

PIXEL_TOP_LEFT = AnchorConvention('pixel_top_left', ORIGIN_TOP_LEFT, Vec2(1.0, 1.0), Vec2(0.0, 0.0))
WORLD_CENTER = AnchorConvention('world_center', ORIGIN_VIEWPORT_CENTER, Vec2(1.0, -1.0), Vec2(0.5, 0.5))


def pointer_to_local(point, convention, viewport):
	"""Convert a pointer position (window pixels, Y-down) into a convention's space.

	Args:
		point: Cursor position in window pixels
		convention: Target AnchorConvention
		viewport: Viewport size in pixels

	Returns:
		Vec2: Position in the convention's space
	"""
	return convention.axis_sign * (point - convention.origin_point(viewport))


def local_to_pointer(point, convention, viewport):
	"""Convert a position in a convention's space back to window pixels.

	Inverse of pointer_to_local for the same convention and viewport.
	"""
	sign = convention.axis_sign
	unscaled = Vec2(point.x / sign.x, point.y / sign.y)
	return unscaled + convention.origin_point(viewport)


def local_rect_to_pointer(rect, convention, viewport):
	"""Convert a rectangle in a convention's space to a window-pixel rectangle.

	Corners are re-ordered so the result's min corner is top-left in
	pointer space even when the source space has a flipped axis.
	"""
	a = local_to_pointer(rect.min, convention, viewport)
	b = local_to_pointer(rect.max, convention, viewport)
	top_left = Vec2(min(a.x, b.x), min(a.y, b.y))
	return Rect(top_left, Vec2(abs(b.x - a.x), abs(b.y - a.y)))
