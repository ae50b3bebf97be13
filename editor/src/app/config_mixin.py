"""Configuration management for TerminusEditorWindow"""

import os
import json
import logging
from utils.logger import loggerRaise
from constants import (
	CONFIG_DIR_NAME, CONFIG_FILE_NAME, CONFIG_DIR_ENV,
	DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT,
	DEFAULT_TICK_INTERVAL_MS, DEFAULT_SHOW_GRID
)

DEFAULT_CONFIG = {
	'window_width': DEFAULT_WINDOW_WIDTH,
	'window_height': DEFAULT_WINDOW_HEIGHT,
	'tick_interval_ms': DEFAULT_TICK_INTERVAL_MS,
	'show_grid': DEFAULT_SHOW_GRID,
}


def default_config_dir():
	"""Config directory, overridable through the environment"""
	return os.environ.get(CONFIG_DIR_ENV) or os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)


def coerce_config_value(key, value):
	"""Convert a loaded value to the type of its default.

	Raises:
		ValueError: If the value cannot stand for that type
	"""
	default = DEFAULT_CONFIG[key]
	if isinstance(default, bool):
		if isinstance(value, bool):
			return value
		if isinstance(value, str) and value.strip().lower() in ('true', 'false'):
			return value.strip().lower() == 'true'
	elif isinstance(default, int):
		if isinstance(value, int) and not isinstance(value, bool):
			return value
		if isinstance(value, float) and value.is_integer():
			return int(value)
		if isinstance(value, str):
			try:
				return int(value.strip())
			except ValueError:
				pass
	raise ValueError(f"Invalid value for '{key}': {value!r}")


class ConfigMixin:
	"""Configuration file load/save for editor settings"""

	_config_logger = logging.getLogger('Config')

	def _init_config(self, config_dir=None):
		"""Resolve config paths and load settings (defaults for anything missing)"""
		self.config_dir = config_dir or default_config_dir()
		self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)
		self.config = dict(DEFAULT_CONFIG)
		self._load_config()

	def _load_config(self):
		"""Load settings from config file"""
		if not os.path.exists(self.config_file):
			self._config_logger.info(f"No config at {self.config_file}, using defaults")
			return
		try:
			with open(self.config_file, 'r', encoding='utf-8') as f:
				loaded = json.load(f)
			if not isinstance(loaded, dict):
				raise ValueError(f"Config root must be an object, got {type(loaded).__name__}")
			# Only known keys are taken
			for key in DEFAULT_CONFIG:
				if key in loaded:
					self.config[key] = coerce_config_value(key, loaded[key])
		except Exception as e:
			loggerRaise(e, "Error loading config")
		self._config_logger.debug(f"Loaded config: {self.config}")

	def _save_config(self):
		"""Save settings to config file"""
		try:
			os.makedirs(self.config_dir, exist_ok=True)
			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(self.config, f, indent=2)
		except Exception as e:
			loggerRaise(e, "Error saving config")
