"""Modal screen widgets for Save Switcher."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Static


class FolderTree(DirectoryTree):
    """DirectoryTree that only shows directories."""

    def filter_paths(self, paths: Iterable[Path]) -> Iterable[Path]:
        return [path for path in paths if path.is_dir()]


class FolderPickerScreen(ModalScreen[Path | None]):
    """Modal for choosing a folder.

    Dismisses with the chosen :class:`Path`, or ``None`` when cancelled.
    """

    BINDINGS = [
        Binding("escape", "cancel", show=False),
    ]

    def __init__(self, start: Path) -> None:
        super().__init__()
        self._start = start
        self._current = start

    @property
    def current(self) -> Path:
        return self._current

    def compose(self) -> ComposeResult:
        with Vertical(id="folder-picker-modal"):
            yield Static(
                "Choose Folder  [dim](Enter opens, Select confirms)[/]",
                id="folder-picker-title",
            )
            yield FolderTree(self._start, id="folder-tree")
            yield Static(str(self._start), id="folder-current", markup=False)
            with Horizontal(id="folder-picker-buttons"):
                yield Button("Select", id="folder-select", variant="primary")
                yield Button("Cancel", id="folder-cancel")

    def on_mount(self) -> None:
        self.query_one("#folder-tree", FolderTree).focus()

    def on_directory_tree_directory_selected(
        self, event: DirectoryTree.DirectorySelected
    ) -> None:
        self._current = event.path
        self.query_one("#folder-current", Static).update(str(event.path))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "folder-select":
            self.dismiss(self._current)
        elif event.button.id == "folder-cancel":
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)
