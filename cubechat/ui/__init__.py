"""UI components for the Cube Chat application."""

from .main_window import MainWindow
from .viewport_host import TkViewportHost
from . import theme

__all__ = ['MainWindow', 'TkViewportHost', 'theme']
