"""Bottom bar component for the editor screen - holds the exit button"""
from PyQt5.QtWidgets import QFrame, QHBoxLayout, QPushButton
from PyQt5.QtCore import Qt

from constants import (
	BOTTOM_BAR_HEIGHT, BOTTOM_BAR_PADDING_H, BOTTOM_BAR_PADDING_V,
	EXIT_BUTTON_SIZE, EXIT_BUTTON_LABEL,
	THEME_UI_PANEL_BACKGROUND, THEME_TEXT
)


class BottomBar(QFrame):
	"""Bottom control bar with the exit button on the left"""

	def __init__(self, editor_screen):
		"""Initialize bottom bar

		Args:
			editor_screen: Parent EditorScreen instance
		"""
		super().__init__(editor_screen)
		self.editor_screen = editor_screen

		self.setStyleSheet(f"QFrame {{ background-color: {THEME_UI_PANEL_BACKGROUND}; border: none; }}")
		self.setFixedHeight(BOTTOM_BAR_HEIGHT)

		self._setup_ui()

	def _setup_ui(self):
		"""Setup the bottom bar UI"""
		layout = QHBoxLayout(self)
		layout.setContentsMargins(BOTTOM_BAR_PADDING_H, BOTTOM_BAR_PADDING_V,
		                          BOTTOM_BAR_PADDING_H, BOTTOM_BAR_PADDING_V)
		layout.setSpacing(0)

		self.exit_btn = QPushButton(EXIT_BUTTON_LABEL)
		self.exit_btn.setObjectName("ExitEditorItem")
		self.exit_btn.setFixedSize(EXIT_BUTTON_SIZE, EXIT_BUTTON_SIZE)
		self.exit_btn.setToolTip("Back to level select")
		self.exit_btn.setStyleSheet(f"""
			QPushButton {{
				font-size: 20px;
				color: {THEME_TEXT};
				background-color: transparent;
				border: none;
			}}
			QPushButton:hover {{
				background-color: rgba(255, 255, 255, 20);
			}}
		""")
		self.exit_btn.clicked.connect(self._on_exit_clicked)
		layout.addWidget(self.exit_btn, 0, Qt.AlignLeft | Qt.AlignVCenter)

		layout.addStretch()

	def _on_exit_clicked(self):
		"""Ask the editor screen to leave the editor"""
		self.editor_screen.exitRequested.emit()
