"""
Terminus Editor - Data Models

Plain data for the editor screen: geometry, draggable elements and the
arena that owns them, drag state, pointer samples and application states.
"""

from .transform import Vec2, Rect
from .anchor import AnchorConvention
from .draggable import ElementHandle, DraggableElement, DraggableArena
from .drag_state import DragState
from .pointer import PointerInput, PointerSample
from .game_state import GameState

__all__ = [
    'Vec2', 'Rect',
    'AnchorConvention',
    'ElementHandle', 'DraggableElement', 'DraggableArena',
    'DragState',
    'PointerInput', 'PointerSample',
    'GameState',
]
