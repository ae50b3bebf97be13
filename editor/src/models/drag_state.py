"""Drag state dataclass for the editor's drag engine.

Single owned object per editor session replacing scattered drag flags.
"""

from dataclasses import dataclass
from typing import Optional

from .draggable import ElementHandle
from .transform import Vec2


@dataclass
class DragState:
    """Current drag of the editor screen.

    Idle when ``handle`` is None, otherwise Dragging(handle, offset).
    ``offset`` only carries meaning while a handle is held.
    """
    handle: Optional[ElementHandle] = None
    offset: Vec2 = Vec2.zero()

    @property
    def is_dragging(self) -> bool:
        return self.handle is not None

    def grab(self, handle: ElementHandle, offset: Vec2):
        self.handle = handle
        self.offset = offset

    def reset(self):
        """Return to Idle, discarding the offset."""
        self.handle = None
        self.offset = Vec2.zero()
