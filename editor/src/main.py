import sys
import os
import logging

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Only show warnings and errors
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)  # Output to console
    ]
)

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QStackedWidget
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor

# Component imports
from components.editor_screen import EditorScreen
from components.level_select_screen import LevelSelectScreen

from models.game_state import GameState

# Utility imports
from utils.logger import set_main_window
from version import get_version

# Mixin imports
from app.config_mixin import ConfigMixin
from app.screen_mixin import ScreenMixin

from constants import WINDOW_TITLE


class TerminusEditorWindow(ConfigMixin, ScreenMixin, QMainWindow):
    def __init__(self, config_dir=None):
        super().__init__()
        self.setWindowTitle(f"{WINDOW_TITLE} {get_version()}")

        # Settings first: window size and tick rate come from config
        self._init_config(config_dir)
        self.resize(self.config['window_width'], self.config['window_height'])

        # Initialize global logger with main window reference
        set_main_window(self)

        self.screen_stack = QStackedWidget()
        self.setCentralWidget(self.screen_stack)

        self.level_select_screen = LevelSelectScreen()
        self.editor_screen = EditorScreen(
            tick_interval_ms=self.config['tick_interval_ms'],
            show_grid=self.config['show_grid'],
        )
        self.level_select_screen.editorRequested.connect(self._on_open_editor)
        self.editor_screen.exitRequested.connect(self._on_exit_editor)

        self._init_screens({
            GameState.LEVEL_SELECT: self.level_select_screen,
            GameState.EDITOR: self.editor_screen,
        })
        self.set_state(GameState.LEVEL_SELECT)

    def closeEvent(self, event):
        """Leave the active screen and remember the window size"""
        if self.game_state is not None:
            self.screens[self.game_state].on_exit()
            self.game_state = None
        self.config['window_width'] = self.width()
        self.config['window_height'] = self.height()
        self._save_config()
        super().closeEvent(event)


def main():
    """Main entry point for the Terminus Editor application"""
    app = QtWidgets.QApplication(sys.argv)

    # Use Fusion style with dark palette
    app.setStyle("Fusion")

    dark_palette = QPalette()
    dark_palette.setColor(QPalette.Window, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.WindowText, Qt.white)
    dark_palette.setColor(QPalette.Base, QColor(25, 25, 25))
    dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ButtonText, Qt.white)
    dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    dark_palette.setColor(QPalette.HighlightedText, Qt.black)

    app.setPalette(dark_palette)

    window = TerminusEditorWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
