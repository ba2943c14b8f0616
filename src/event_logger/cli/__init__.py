"""CLI helpers exposed for other modules."""

from .helpers import AppState, console, get_state
from .menu import MenuContext, run_menu

__all__ = ["AppState", "MenuContext", "console", "get_state", "run_menu"]
