"""Hit testing for draggable elements."""

from utils.coordinate_transforms import pointer_to_local


def find_hit(cursor, elements, viewport):
	"""Find which draggable element (if any) is under the cursor.

	Elements are checked in insertion order and the first whose rectangle
	contains the cursor wins, so earlier elements take priority where
	rectangles overlap. Edges count as inside.

	Args:
		cursor: Cursor position in window pixels (Vec2)
		elements: Iterable of (handle, DraggableElement) pairs, e.g. a DraggableArena
		viewport: Viewport size in pixels (Vec2)

	Returns:
		ElementHandle or None
	"""
	for handle, element in elements:
		local_cursor = pointer_to_local(cursor, element.convention, viewport)
		if element.local_rect().contains(local_cursor):
			return handle
	return None
