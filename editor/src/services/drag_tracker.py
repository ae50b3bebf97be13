"""Single-active-drag tracker.

Drives a DragState through Idle -> Dragging -> Idle once per frame:

	press edge + hit   Idle -> Dragging(handle, offset = anchor - cursor)
	every tick held    anchor = cursor + offset
	release edge       Dragging -> Idle

The cursor is converted into the dragged element's own space before both
the offset capture and every move, using the element's convention.
"""

import logging

from services.hit_tester import find_hit
from utils.coordinate_transforms import pointer_to_local

logger = logging.getLogger('DragTracker')


def begin_drag(drag_state, arena, cursor, viewport):
	"""Start dragging the element under the cursor, if any.

	Returns:
		bool: True if a drag started
	"""
	if drag_state.is_dragging:
		return False

	handle = find_hit(cursor, arena, viewport)
	if handle is None:
		return False

	element = arena.get(handle)
	local_cursor = pointer_to_local(cursor, element.convention, viewport)
	drag_state.grab(handle, element.anchor - local_cursor)
	logger.debug(f"Grabbed {element.name} at {element.anchor} (offset {drag_state.offset})")
	return True


def move_drag(drag_state, arena, cursor, viewport):
	"""Reposition the dragged element so its grab offset is preserved.

	A handle that no longer resolves is skipped without leaving Dragging.

	Returns:
		bool: True if an anchor was written
	"""
	if not drag_state.is_dragging:
		return False

	element = arena.get(drag_state.handle)
	if element is None:
		logger.debug(f"Dragged element {drag_state.handle} no longer exists, skipping move")
		return False

	local_cursor = pointer_to_local(cursor, element.convention, viewport)
	element.anchor = local_cursor + drag_state.offset
	return True


def end_drag(drag_state):
	"""Release the current drag regardless of cursor position."""
	if drag_state.is_dragging:
		logger.debug(f"Released {drag_state.handle}")
	drag_state.reset()


def drag_tick(drag_state, sample, arena):
	"""Evaluate one frame of the drag interaction.

	Hit testing finishes before the single anchor write of the tick.

	Args:
		drag_state: DragState owned by the editor screen
		sample: PointerSample for this frame
		arena: DraggableArena holding the screen's draggable elements

	Returns:
		bool: True if an element's anchor was written this tick
	"""
	if sample.cursor is None:
		return False
	assert sample.viewport is not None, "Drag tick requires an active viewport"

	if sample.just_pressed:
		begin_drag(drag_state, arena, sample.cursor, sample.viewport)

	moved = move_drag(drag_state, arena, sample.cursor, sample.viewport)

	if sample.just_released:
		end_drag(drag_state)

	return moved
