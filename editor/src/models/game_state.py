"""Top-level application states."""
from enum import Enum


class GameState(Enum):
    LEVEL_SELECT = 'level_select'
    EDITOR = 'editor'
