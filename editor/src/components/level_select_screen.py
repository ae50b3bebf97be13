"""Level select screen - entry point into the editor"""
from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QPushButton
from PyQt5.QtCore import Qt, pyqtSignal

from constants import THEME_BACKGROUND, THEME_TEXT


class LevelSelectScreen(QWidget):
	"""Minimal host screen with a button that opens the editor"""

	editorRequested = pyqtSignal()

	def __init__(self, parent=None):
		super().__init__(parent)
		self.setObjectName("LevelSelectScreen")
		self.setAttribute(Qt.WA_StyledBackground)
		self.setStyleSheet(f"""
			#LevelSelectScreen {{ background-color: {THEME_BACKGROUND}; }}
			QLabel {{ color: {THEME_TEXT}; font-size: 18px; }}
		""")

		layout = QVBoxLayout(self)
		layout.setAlignment(Qt.AlignCenter)

		title = QLabel("Levels")
		title.setAlignment(Qt.AlignCenter)
		layout.addWidget(title)

		self.editor_btn = QPushButton("Editor")
		self.editor_btn.setFixedWidth(160)
		self.editor_btn.clicked.connect(self._on_editor_clicked)
		layout.addWidget(self.editor_btn, 0, Qt.AlignHCenter)

	def on_enter(self):
		pass

	def on_exit(self):
		pass

	def _on_editor_clicked(self):
		self.editorRequested.emit()
