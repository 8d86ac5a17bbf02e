"""Status indicator widgets for Save Switcher."""

from __future__ import annotations

from textual.timer import Timer
from textual.widgets import Static


class StatusLine(Static):
    """One-line outcome indicator that clears itself after a delay."""

    def __init__(self, *, id: str | None = None) -> None:  # noqa: A002
        super().__init__("", id=id, classes="status-line")
        self._clear_timer: Timer | None = None
        self._status_text = ""

    @property
    def status_text(self) -> str:
        """The message currently shown."""
        return self._status_text

    def flash(self, text: str, *, ok: bool, seconds: float) -> None:
        """Show *text* styled as success or failure for *seconds*."""
        if self._clear_timer is not None:
            self._clear_timer.stop()
        self.set_class(ok, "success")
        self.set_class(not ok, "failed")
        self._status_text = text
        self.update(text)
        self._clear_timer = self.set_timer(seconds, self.clear_status)

    def clear_status(self) -> None:
        self._clear_timer = None
        self.remove_class("success", "failed")
        self._status_text = ""
        self.update("")
