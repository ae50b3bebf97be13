"""Screen state transitions for TerminusEditorWindow"""

import logging

from models.game_state import GameState


class ScreenMixin:
	"""Switches the stacked screens on GameState changes, running enter/exit hooks"""

	_screen_logger = logging.getLogger('Screens')

	def _init_screens(self, screens):
		"""Register one screen widget per GameState

		Args:
			screens: dict GameState -> screen widget with on_enter/on_exit
		"""
		self.screens = screens
		for screen in screens.values():
			self.screen_stack.addWidget(screen)
		self.game_state = None

	def set_state(self, state):
		"""Transition to ``state``: exit the current screen, then enter the new one"""
		if state == self.game_state:
			return
		if self.game_state is not None:
			self.screens[self.game_state].on_exit()

		previous = self.game_state
		self.game_state = state
		screen = self.screens[state]
		self.screen_stack.setCurrentWidget(screen)
		screen.on_enter()
		self._screen_logger.info(f"State {previous} -> {state}")

	def _on_exit_editor(self):
		self.set_state(GameState.LEVEL_SELECT)

	def _on_open_editor(self):
		self.set_state(GameState.EDITOR)
