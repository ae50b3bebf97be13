"""
Terminus Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Grid and world layout
- Editor screen layout (bottom bar, content area)
- Draggable element defaults
- Theme colors and paint layers
- Frame timing and config defaults
"""

# ======================================================================
# GRID
# ======================================================================

# Spacing between grid points in world units
GRID_SIZE = 40

# Grid extent in cells from the origin (inclusive on both sides)
GRID_HALF_COLUMNS = 25
GRID_HALF_ROWS = 15

# Grid dot radius (pixels)
GRID_POINT_RADIUS = 2.5

# ======================================================================
# EDITOR LAYOUT
# ======================================================================

BOTTOM_BAR_HEIGHT = 70
BOTTOM_BAR_PADDING_H = 20
BOTTOM_BAR_PADDING_V = 10

# Main content grid: two flexible columns
CONTENT_PADDING = 20
CONTENT_COLUMN_GAP = 20
CONTENT_COLUMN_FLEX = (0.75, 0.25)

EXIT_BUTTON_SIZE = 50
EXIT_BUTTON_LABEL = "←"

# ======================================================================
# DRAGGABLE ELEMENTS
# ======================================================================

DRAGGABLE_SIZE = 50.0

# Preview square (pixel layout): left offset and gap above the bottom bar
PREVIEW_SQUARE_LEFT = 90.0
PREVIEW_SQUARE_BOTTOM = 10.0

# Termini (world layout): grid cells from the origin along X
TERMINUS_GRID_OFFSET = 5

DRAGGABLE_GRAY = 0.2
DRAGGABLE_COLOR = (DRAGGABLE_GRAY, DRAGGABLE_GRAY, DRAGGABLE_GRAY, 0.4)

PREVIEW_SQUARE_NAME = "PreviewSquare"
OUT_TERMINUS_NAME = "OutTerminus"
IN_TERMINUS_NAME = "InTerminus"

# ======================================================================
# THEME
# ======================================================================

THEME_BACKGROUND = '#1e1e1e'
THEME_GRID = '#4a4a4a'
THEME_UI_PANEL_BACKGROUND = '#2d2d2d'
THEME_TEXT = '#dddddd'

# ======================================================================
# FRAME TIMING
# ======================================================================

# Per-frame drag tick interval (~60 fps)
DEFAULT_TICK_INTERVAL_MS = 16

# ======================================================================
# CONFIG
# ======================================================================

CONFIG_DIR_NAME = ".terminus_editor"
CONFIG_FILE_NAME = "config.json"
CONFIG_DIR_ENV = "TERMINUS_EDITOR_CONFIG_DIR"

DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 720
DEFAULT_SHOW_GRID = True

WINDOW_TITLE = "Terminus Editor"
