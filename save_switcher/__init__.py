"""Save Switcher - promote a ``bf2savefile*`` save to the active slot."""

from .constants import VERSION as __version__

__all__ = ["__version__"]
