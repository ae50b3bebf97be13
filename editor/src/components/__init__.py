"""UI components for the Terminus Editor

Screens and the widgets they are built from:
- editor_screen: editor with draggable terminus handles
- drag_overlay: paints draggable elements above the editor screen
- bottom_bar: editor bottom bar with the exit button
- level_select_screen: host screen that opens the editor
"""

from .editor_screen import EditorScreen
from .level_select_screen import LevelSelectScreen

__all__ = [
    'EditorScreen',
    'LevelSelectScreen',
]
