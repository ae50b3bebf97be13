"""Draggable element model and the arena that owns the elements of a screen.

The arena hands out generational handles. A handle stays valid for the
lifetime of its element; once the element is removed the handle resolves
to None even if the slot is later reused by a new element.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Optional, Tuple

from .anchor import AnchorConvention
from .transform import Rect, Vec2


class ElementHandle(NamedTuple):
    """Opaque identity of a draggable element (slot index + generation)."""
    index: int
    generation: int


@dataclass
class DraggableElement:
    """A positioned rectangle that can be picked up and moved.

    ``anchor`` is expressed in the element's own convention space: the
    top-left corner in window pixels, or the center in world units.
    """
    name: str
    anchor: Vec2
    size: Vec2
    convention: AnchorConvention
    color: Tuple[float, float, float, float] = (0.2, 0.2, 0.2, 0.4)

    def local_rect(self) -> Rect:
        """Rectangle in the element's convention space."""
        return self.convention.rect_around(self.anchor, self.size)


@dataclass
class _Slot:
    generation: int = 0
    element: Optional[DraggableElement] = None


class DraggableArena:
    """Ordered storage for the draggable elements of one editor screen."""

    _logger = logging.getLogger('DraggableArena')

    def __init__(self):
        self._slots: List[_Slot] = []
        self._free: List[int] = []
        self._order: List[ElementHandle] = []

    def __len__(self):
        return len(self._order)

    def __iter__(self) -> Iterator[Tuple[ElementHandle, DraggableElement]]:
        """Iterate (handle, element) pairs in insertion order."""
        for handle in list(self._order):
            yield handle, self._slots[handle.index].element

    def __contains__(self, handle):
        return self.get(handle) is not None

    def insert(self, element: DraggableElement) -> ElementHandle:
        if self._free:
            index = self._free.pop()
            slot = self._slots[index]
        else:
            index = len(self._slots)
            slot = _Slot()
            self._slots.append(slot)
        slot.element = element
        handle = ElementHandle(index, slot.generation)
        self._order.append(handle)
        return handle

    def get(self, handle: Optional[ElementHandle]) -> Optional[DraggableElement]:
        """Resolve a handle, returning None when it no longer refers to a live element."""
        if handle is None or not 0 <= handle.index < len(self._slots):
            return None
        slot = self._slots[handle.index]
        if slot.generation != handle.generation:
            return None
        return slot.element

    def remove(self, handle: ElementHandle) -> bool:
        """Destroy the element behind ``handle``. Returns False for stale handles."""
        if self.get(handle) is None:
            return False
        slot = self._slots[handle.index]
        slot.element = None
        slot.generation += 1
        self._free.append(handle.index)
        self._order.remove(handle)
        self._logger.debug(f"Removed element at slot {handle.index} (generation {handle.generation})")
        return True

    def clear(self):
        for handle in list(self._order):
            self.remove(handle)

    def find_by_name(self, name: str) -> Optional[ElementHandle]:
        for handle, element in self:
            if element.name == name:
                return handle
        return None
