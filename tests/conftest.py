"""
Shared fixtures for Terminus Editor tests.

Provides draggable elements in both layout conventions, a populated
arena, and pointer sample helpers.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# ── Viewport used by most tests ──────────────────────────────────────────

VIEWPORT_W = 800.0
VIEWPORT_H = 600.0


@pytest.fixture
def viewport():
    from models.transform import Vec2
    return Vec2(VIEWPORT_W, VIEWPORT_H)


@pytest.fixture
def arena():
    """Empty draggable arena"""
    from models.draggable import DraggableArena
    return DraggableArena()


@pytest.fixture
def drag_state():
    from models.drag_state import DragState
    return DragState()


@pytest.fixture
def pixel_square():
    """50x50 top-left anchored element at (90, 10)"""
    from models.draggable import DraggableElement
    from models.transform import Vec2
    from utils.coordinate_transforms import PIXEL_TOP_LEFT
    return DraggableElement("Square", Vec2(90.0, 10.0), Vec2(50.0, 50.0), PIXEL_TOP_LEFT)


@pytest.fixture
def world_terminus():
    """50x50 center anchored world element at (0, 100)"""
    from models.draggable import DraggableElement
    from models.transform import Vec2
    from utils.coordinate_transforms import WORLD_CENTER
    return DraggableElement("Terminus", Vec2(0.0, 100.0), Vec2(50.0, 50.0), WORLD_CENTER)


@pytest.fixture
def make_sample(viewport):
    """Factory for PointerSample at a pixel cursor position"""
    from models.pointer import PointerSample
    from models.transform import Vec2

    def _make(x, y, pressed=False, released=False):
        return PointerSample(pressed, released, Vec2(float(x), float(y)), viewport)
    return _make
