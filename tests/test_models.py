"""
Tests for the editor data models.

Covers:
- Vec2 arithmetic and unpacking
- DraggableArena insertion order, generational handles, removal, clear
- DragState grab/reset
- PointerInput edge latching between frames
- DraggableElement annotations resolve at runtime
"""
import typing

from models.anchor import AnchorConvention
from models.draggable import DraggableArena, DraggableElement, ElementHandle
from models.drag_state import DragState
from models.pointer import PointerInput
from models.transform import Vec2
from utils.coordinate_transforms import PIXEL_TOP_LEFT


def _element(name):
    return DraggableElement(name, Vec2(0.0, 0.0), Vec2(10.0, 10.0), PIXEL_TOP_LEFT)


# ══════════════════════════════════════════════════════════════════════════
# Vec2
# ══════════════════════════════════════════════════════════════════════════

class TestVec2:

    def test_add_sub(self):
        assert Vec2(1.0, 2.0) + Vec2(3.0, 4.0) == Vec2(4.0, 6.0)
        assert Vec2(1.0, 2.0) - Vec2(3.0, 5.0) == Vec2(-2.0, -3.0)

    def test_scalar_and_componentwise_mul(self):
        assert Vec2(2.0, 3.0) * 2 == Vec2(4.0, 6.0)
        assert 0.5 * Vec2(2.0, 3.0) == Vec2(1.0, 1.5)
        assert Vec2(2.0, 3.0) * Vec2(1.0, -1.0) == Vec2(2.0, -3.0)

    def test_unpacking(self):
        x, y = Vec2(7.0, 8.0)
        assert (x, y) == (7.0, 8.0)


# ══════════════════════════════════════════════════════════════════════════
# DraggableArena
# ══════════════════════════════════════════════════════════════════════════

class TestDraggableArena:

    def test_iterates_in_insertion_order(self, arena):
        for name in ("c", "a", "b"):
            arena.insert(_element(name))
        assert [element.name for _, element in arena] == ["c", "a", "b"]
        assert len(arena) == 3

    def test_get_resolves_live_handle(self, arena):
        element = _element("a")
        handle = arena.insert(element)
        assert arena.get(handle) is element
        assert handle in arena

    def test_removed_handle_resolves_to_none(self, arena):
        handle = arena.insert(_element("a"))
        assert arena.remove(handle)
        assert arena.get(handle) is None
        assert handle not in arena
        assert len(arena) == 0

    def test_remove_stale_handle_returns_false(self, arena):
        handle = arena.insert(_element("a"))
        arena.remove(handle)
        assert not arena.remove(handle)

    def test_reused_slot_gets_new_generation(self, arena):
        old = arena.insert(_element("a"))
        arena.remove(old)
        new = arena.insert(_element("b"))
        assert new.index == old.index
        assert new.generation == old.generation + 1
        assert arena.get(old) is None
        assert arena.get(new).name == "b"

    def test_reused_slot_appends_to_order(self, arena):
        first = arena.insert(_element("a"))
        arena.insert(_element("b"))
        arena.remove(first)
        arena.insert(_element("c"))
        assert [element.name for _, element in arena] == ["b", "c"]

    def test_unknown_handles(self, arena):
        assert arena.get(None) is None
        assert arena.get(ElementHandle(42, 0)) is None

    def test_clear_invalidates_everything(self, arena):
        handles = [arena.insert(_element(n)) for n in ("a", "b")]
        arena.clear()
        assert len(arena) == 0
        assert all(arena.get(h) is None for h in handles)

    def test_find_by_name(self, arena):
        arena.insert(_element("a"))
        b = arena.insert(_element("b"))
        assert arena.find_by_name("b") == b
        assert arena.find_by_name("missing") is None

    def test_convention_annotation_resolves(self):
        hints = typing.get_type_hints(DraggableElement)
        assert hints['convention'] is AnchorConvention


# ══════════════════════════════════════════════════════════════════════════
# DragState
# ══════════════════════════════════════════════════════════════════════════

class TestDragState:

    def test_starts_idle(self):
        state = DragState()
        assert not state.is_dragging
        assert state.offset == Vec2(0.0, 0.0)

    def test_grab_and_reset(self):
        state = DragState()
        state.grab(ElementHandle(0, 0), Vec2(-10.0, -10.0))
        assert state.is_dragging
        assert state.offset == Vec2(-10.0, -10.0)
        state.reset()
        assert state.handle is None
        assert state.offset == Vec2(0.0, 0.0)


# ══════════════════════════════════════════════════════════════════════════
# PointerInput
# ══════════════════════════════════════════════════════════════════════════

class TestPointerInput:

    def test_press_latched_for_one_sample(self, viewport):
        pointer = PointerInput()
        pointer.press()
        first = pointer.sample(Vec2(1.0, 2.0), viewport)
        second = pointer.sample(Vec2(1.0, 2.0), viewport)
        assert first.just_pressed and not first.just_released
        assert not second.just_pressed
        assert pointer.held

    def test_press_and_release_between_frames(self, viewport):
        pointer = PointerInput()
        pointer.press()
        pointer.release()
        sample = pointer.sample(Vec2(0.0, 0.0), viewport)
        assert sample.just_pressed and sample.just_released
        assert not pointer.held

    def test_release_then_press_in_one_frame_keeps_button_held(self, viewport):
        pointer = PointerInput()
        pointer.press()
        pointer.release()
        pointer.press()
        sample = pointer.sample(Vec2(0.0, 0.0), viewport)
        assert sample.just_pressed
        assert not sample.just_released
        assert pointer.held

    def test_release_pending_until_sampled(self, viewport):
        pointer = PointerInput()
        pointer.press()
        pointer.sample(Vec2(0.0, 0.0), viewport)
        pointer.release()
        assert pointer.release_pending
        pointer.clear_edges()
        assert not pointer.release_pending
        assert not pointer.sample(Vec2(0.0, 0.0), viewport).just_released

    def test_release_without_press_has_no_edge(self, viewport):
        pointer = PointerInput()
        pointer.release()
        assert not pointer.sample(Vec2(0.0, 0.0), viewport).just_released

    def test_repeated_press_while_held_has_no_edge(self, viewport):
        pointer = PointerInput()
        pointer.press()
        pointer.sample(Vec2(0.0, 0.0), viewport)
        pointer.press()
        assert not pointer.sample(Vec2(0.0, 0.0), viewport).just_pressed

    def test_sample_carries_cursor_and_viewport(self, viewport):
        sample = PointerInput().sample(Vec2(3.0, 4.0), viewport)
        assert sample.cursor == Vec2(3.0, 4.0)
        assert sample.viewport == viewport

    def test_reset_drops_pending_edges(self, viewport):
        pointer = PointerInput()
        pointer.press()
        pointer.reset()
        sample = pointer.sample(Vec2(0.0, 0.0), viewport)
        assert not sample.just_pressed
        assert not pointer.held
