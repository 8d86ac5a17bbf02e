"""Widget classes for the Save Switcher app."""

from .indicators import StatusLine
from .screens import FolderPickerScreen, FolderTree

__all__ = [
    "FolderPickerScreen",
    "FolderTree",
    "StatusLine",
]
