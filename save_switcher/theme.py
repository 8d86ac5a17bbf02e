"""Theme definitions for Save Switcher.

Keys match :data:`save_switcher.preferences.THEME_NAMES`.  The palettes are
built around the status line: ``success`` and ``error`` must stay readable
against ``surface`` since that is where "Success!" / "Failed" flash.
"""

from textual.theme import Theme

TEXTUAL_THEMES: dict[str, Theme] = {
    "dark": Theme(
        name="switcher-dark",
        primary="#5f8f3e",
        secondary="#c9a227",
        accent="#3b5a6b",
        background="#0d1110",
        surface="#161d1a",
        panel="#2e3b34",
        success="#6fcf5a",
        warning="#e0b341",
        error="#e0564a",
        dark=True,
    ),
    "light": Theme(
        name="switcher-light",
        primary="#3f6e2a",
        secondary="#9a7614",
        accent="#4d7488",
        background="#f4f1e8",
        surface="#e9e4d6",
        panel="#c8c1ad",
        success="#2f7d1f",
        warning="#a06a00",
        error="#b3261e",
        dark=False,
    ),
}


def get_textual_theme(name: str) -> Theme:
    """Return the Textual theme for *name*, defaulting to dark."""
    return TEXTUAL_THEMES.get(name, TEXTUAL_THEMES["dark"])
