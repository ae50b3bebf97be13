"""
Editor Screen - level editor with draggable terminus handles

Provides:
- World grid of dots centered on the screen
- Main content area and bottom bar with exit button
- Preview square and in/out terminus handles that can be dragged
- Per-frame drag tick driven by a QTimer
"""

import logging

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QGridLayout
from PyQt5.QtCore import Qt, QTimer, QPointF, pyqtSignal
from PyQt5.QtGui import QPainter, QBrush, QColor

from components.bottom_bar import BottomBar
from components.drag_overlay import DragOverlay
from models.draggable import DraggableArena, DraggableElement
from models.drag_state import DragState
from models.pointer import PointerInput
from models.transform import Vec2
from services.drag_tracker import drag_tick, end_drag
from services.grid import grid_points
from utils.coordinate_transforms import PIXEL_TOP_LEFT, WORLD_CENTER, local_to_pointer
from constants import (
	GRID_SIZE, GRID_POINT_RADIUS, CONTENT_PADDING, CONTENT_COLUMN_GAP, CONTENT_COLUMN_FLEX,
	DRAGGABLE_SIZE, DRAGGABLE_COLOR, PREVIEW_SQUARE_LEFT, PREVIEW_SQUARE_BOTTOM,
	TERMINUS_GRID_OFFSET, PREVIEW_SQUARE_NAME, OUT_TERMINUS_NAME, IN_TERMINUS_NAME,
	THEME_BACKGROUND, THEME_GRID, THEME_UI_PANEL_BACKGROUND, DEFAULT_TICK_INTERVAL_MS
)


class EditorScreen(QWidget):
	"""Editor screen owning its draggable elements and drag state"""

	# Signals
	exitRequested = pyqtSignal()  # Exit button pressed

	def __init__(self, parent=None, tick_interval_ms=DEFAULT_TICK_INTERVAL_MS, show_grid=True):
		super().__init__(parent)
		self._logger = logging.getLogger('EditorScreen')
		self.setMouseTracking(True)

		# Per-session state, rebuilt on every enter
		self.arena = DraggableArena()
		self.drag_state = DragState()
		self.pointer = PointerInput()
		self.cursor_pos = None  # Last known cursor in screen pixels, None when outside
		self._preview_handle = None

		self.show_grid = show_grid
		self._grid = grid_points()

		self.tick_timer = QTimer(self)
		self.tick_timer.setInterval(tick_interval_ms)
		self.tick_timer.timeout.connect(self.tick)

		self._setup_ui()

	def _setup_ui(self):
		"""Root column: main content grid above the bottom bar, overlay on top"""
		layout = QVBoxLayout(self)
		layout.setContentsMargins(0, 0, 0, 0)
		layout.setSpacing(0)

		self.main_content = QWidget(self)
		content_layout = QGridLayout(self.main_content)
		content_layout.setContentsMargins(CONTENT_PADDING, CONTENT_PADDING, CONTENT_PADDING, CONTENT_PADDING)
		content_layout.setHorizontalSpacing(CONTENT_COLUMN_GAP)

		self.canvas_area = QWidget(self.main_content)
		self.side_panel = QWidget(self.main_content)
		self.side_panel.setObjectName("EditorSidePanel")
		self.side_panel.setAttribute(Qt.WA_StyledBackground)
		self.side_panel.setStyleSheet(f"#EditorSidePanel {{ background-color: {THEME_UI_PANEL_BACKGROUND}; }}")
		content_layout.addWidget(self.canvas_area, 0, 0)
		content_layout.addWidget(self.side_panel, 0, 1)
		content_layout.setColumnStretch(0, int(CONTENT_COLUMN_FLEX[0] * 100))
		content_layout.setColumnStretch(1, int(CONTENT_COLUMN_FLEX[1] * 100))
		layout.addWidget(self.main_content, 1)

		self.bottom_bar = BottomBar(self)
		layout.addWidget(self.bottom_bar)

		self.drag_overlay = DragOverlay(self, self.arena)
		self.drag_overlay.raise_()

	# ── Lifecycle ────────────────────────────────────────────────────────

	def on_enter(self):
		"""Populate the draggable elements and start ticking"""
		self.arena.clear()
		self.drag_state.reset()
		self.pointer.reset()
		self._spawn_draggables()
		self.tick_timer.start()
		self._logger.info(f"Entered editor with {len(self.arena)} draggable elements")
		self.update()

	def on_exit(self):
		"""Stop ticking, drop any drag in progress and destroy the elements"""
		self.tick_timer.stop()
		self.drag_state.reset()
		self.pointer.reset()
		self.arena.clear()
		self._preview_handle = None
		self.drag_overlay.active_handle = None
		self._logger.info("Exited editor")
		self.update()

	def _spawn_draggables(self):
		"""Create the preview square and the two terminus handles"""
		size = Vec2(DRAGGABLE_SIZE, DRAGGABLE_SIZE)

		# Preview square sits just above the bottom edge, top-left anchored
		preview_top = self.height() - PREVIEW_SQUARE_BOTTOM - DRAGGABLE_SIZE
		self._preview_handle = self.arena.insert(DraggableElement(
			PREVIEW_SQUARE_NAME, Vec2(PREVIEW_SQUARE_LEFT, preview_top), size,
			PIXEL_TOP_LEFT, DRAGGABLE_COLOR))

		# Termini start on grid points either side of the world origin
		terminus_x = float(TERMINUS_GRID_OFFSET * GRID_SIZE)
		self.arena.insert(DraggableElement(
			OUT_TERMINUS_NAME, Vec2(-terminus_x, 0.0), size, WORLD_CENTER, DRAGGABLE_COLOR))
		self.arena.insert(DraggableElement(
			IN_TERMINUS_NAME, Vec2(terminus_x, 0.0), size, WORLD_CENTER, DRAGGABLE_COLOR))

	# ── Frame tick ───────────────────────────────────────────────────────

	def viewport_size(self):
		"""Screen size in pixels, None when the screen has no area"""
		if self.width() <= 0 or self.height() <= 0:
			return None
		return Vec2(float(self.width()), float(self.height()))

	def tick(self):
		"""Run one frame of the drag interaction"""
		if self.cursor_pos is None:
			if self.pointer.release_pending:
				# Released outside the window: drop the drag where it is
				self.pointer.clear_edges()
				end_drag(self.drag_state)
				self._sync_overlay()
			# A latched press waits for the frame the cursor comes back on
			return False
		sample = self.pointer.sample(self.cursor_pos, self.viewport_size())
		moved = drag_tick(self.drag_state, sample, self.arena)

		if self._sync_overlay():
			moved = True
		if moved:
			self.drag_overlay.update()
		return moved

	def _sync_overlay(self):
		"""Point the overlay highlight at the dragged element. Returns True if it changed."""
		if self.drag_overlay.active_handle == self.drag_state.handle:
			return False
		self.drag_overlay.active_handle = self.drag_state.handle
		self.drag_overlay.update()
		return True

	# ── Input ────────────────────────────────────────────────────────────

	def _track_cursor(self, event):
		self.cursor_pos = Vec2(float(event.pos().x()), float(event.pos().y()))

	def mousePressEvent(self, event):
		"""Latch a left-button press for the next tick"""
		if event.button() == Qt.LeftButton:
			self._track_cursor(event)
			self.pointer.press()
			event.accept()
			return
		super().mousePressEvent(event)

	def mouseMoveEvent(self, event):
		self._track_cursor(event)
		super().mouseMoveEvent(event)

	def mouseReleaseEvent(self, event):
		"""Latch a left-button release for the next tick"""
		if event.button() == Qt.LeftButton:
			self._track_cursor(event)
			self.pointer.release()
			event.accept()
			return
		super().mouseReleaseEvent(event)

	def leaveEvent(self, event):
		"""Cursor left the window - drag moves pause until it returns"""
		self.cursor_pos = None
		super().leaveEvent(event)

	def resizeEvent(self, event):
		"""Keep the preview square at its distance from the bottom edge"""
		super().resizeEvent(event)
		old_height = event.oldSize().height()
		preview = self.arena.get(self._preview_handle)
		if preview is None or old_height < 0 or self.drag_state.handle == self._preview_handle:
			return
		preview.anchor = preview.anchor + Vec2(0.0, float(self.height() - old_height))
		self.drag_overlay.update()

	# ── Painting ─────────────────────────────────────────────────────────

	def paintEvent(self, event):
		"""Draw the background and the world grid"""
		painter = QPainter(self)
		painter.fillRect(self.rect(), QColor(THEME_BACKGROUND))

		viewport = self.viewport_size()
		if self.show_grid and viewport is not None:
			painter.setRenderHint(QPainter.Antialiasing)
			painter.setPen(Qt.NoPen)
			painter.setBrush(QBrush(QColor(THEME_GRID)))
			for x, y in self._grid:
				p = local_to_pointer(Vec2(x, y), WORLD_CENTER, viewport)
				painter.drawEllipse(QPointF(p.x, p.y), GRID_POINT_RADIUS, GRID_POINT_RADIUS)

		painter.end()
