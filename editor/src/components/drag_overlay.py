"""
Drag Overlay - paints the draggable elements above the editor screen

Covers the whole editor screen (bottom bar included) so elements can be
dragged anywhere on it. The overlay is transparent for mouse events; the
editor screen underneath receives the input and runs the drag tick.
"""

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QRectF, QEvent
from PyQt5.QtGui import QPainter, QPen, QBrush, QColor

from models.transform import Vec2
from utils.coordinate_transforms import local_rect_to_pointer


class DragOverlay(QWidget):
	"""Translucent layer drawing every element of a DraggableArena"""

	def __init__(self, parent, arena):
		super().__init__(parent)
		self.setAttribute(Qt.WA_TranslucentBackground)
		self.setAttribute(Qt.WA_TransparentForMouseEvents)

		self.arena = arena
		# Handle of the element being dragged, highlighted while held
		self.active_handle = None

		# Position absolutely on top of parent
		self.setGeometry(0, 0, parent.width(), parent.height())
		parent.installEventFilter(self)

	def eventFilter(self, obj, event):
		"""Handle parent resize to keep overlay covering parent"""
		if event.type() == QEvent.Resize and obj == self.parent():
			self.setGeometry(0, 0, obj.width(), obj.height())
		return super().eventFilter(obj, event)

	def element_pixel_rect(self, element):
		"""Window-pixel rectangle of an element as a QRectF"""
		viewport = Vec2(self.width(), self.height())
		rect = local_rect_to_pointer(element.local_rect(), element.convention, viewport)
		return QRectF(rect.min.x, rect.min.y, rect.size.x, rect.size.y)

	def paintEvent(self, event):
		"""Draw the draggable elements in insertion order"""
		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)

		for handle, element in self.arena:
			r, g, b, a = element.color
			painter.setBrush(QBrush(QColor.fromRgbF(r, g, b, a)))
			if handle == self.active_handle:
				painter.setPen(QPen(QColor(90, 141, 191, 200), 2))
			else:
				painter.setPen(Qt.NoPen)
			painter.drawRect(self.element_pixel_rect(element))

		painter.end()
