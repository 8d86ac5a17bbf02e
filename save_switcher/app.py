"""Main Save Switcher application."""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Checkbox, Footer, Input, OptionList, Static
from textual.widgets.option_list import Option

from .constants import ACTIVE_SAVE_NAME, STATUS_FAILED, STATUS_SUCCESS
from .core import PromoteWorkflow, WorkflowResult, pick_selection, rank, scan_directory
from .log import logger
from .persistence import ConfigStore, PersistedState
from .preferences import THEME_NAMES, Preferences, load_preferences, save_theme_name
from .theme import get_textual_theme
from .widgets import FolderPickerScreen, StatusLine


class SaveSwitcherApp(App):
    """Save Switcher - promote a save file to the active slot."""

    CSS_PATH = "styles.tcss"
    TITLE = "Save Switcher"

    BINDINGS = [
        Binding("ctrl+o", "overwrite", "Overwrite", show=True),
        Binding("ctrl+b", "browse", "Browse", show=True),
        Binding("ctrl+t", "toggle_pin", "Pin", show=True),
        Binding("ctrl+r", "rescan", "Rescan", show=False),
        Binding("f2", "toggle_theme", "Theme", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        store: ConfigStore,
        prefs: Preferences | None = None,
        start_directory: Path | None = None,
        prefs_path: Path | None = None,
    ) -> None:
        super().__init__()
        self._store = store
        self._workflow = PromoteWorkflow(store)
        self._prefs_path = prefs_path
        self._prefs = prefs or load_preferences(prefs_path)
        self._state: PersistedState = store.load()
        self._ranked: list[str] = []
        # Name to keep highlighted across rescans; seeded from the saved state.
        self._preferred_name = self._state.file_name

        if self._state.directory:
            start = self._state.directory
        elif start_directory is not None:
            start = str(start_directory)
        elif self._prefs.start_in_cwd:
            start = str(Path.cwd())
        else:
            start = ""
        self._start_directory = start

    # ── Layout ──────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        with Vertical(id="main"):
            yield Static("Directory", classes="field-label")
            with Horizontal(id="directory-row"):
                yield Input(
                    self._start_directory,
                    placeholder="Folder containing bf2savefile*",
                    id="directory-input",
                )
                yield Button("Browse…", id="browse")
            yield Static(
                f"Save to copy over {ACTIVE_SAVE_NAME}",
                classes="field-label",
                markup=False,
            )
            yield OptionList(id="file-list")
            with Horizontal(id="action-row"):
                yield Checkbox("Pin on top", self._state.pin, id="pin")
                yield Button("Overwrite", id="overwrite", variant="primary")
                yield StatusLine(id="status")
        yield Footer()

    def on_mount(self) -> None:
        self._apply_theme(self._prefs.theme_name)
        self._apply_pin(self._state.pin)
        self._refresh_candidates(self._start_directory)

    def _apply_theme(self, name: str) -> None:
        theme = get_textual_theme(name)
        self.register_theme(theme)
        self.theme = theme.name

    def action_toggle_theme(self) -> None:
        """Switch to the next built-in theme and remember it."""
        names = list(THEME_NAMES)
        current = self._prefs.theme_name
        index = names.index(current) if current in names else -1
        self._prefs.theme_name = names[(index + 1) % len(names)]
        self._apply_theme(self._prefs.theme_name)
        save_theme_name(self._prefs.theme_name, self._prefs_path)

    # ── Candidate list ──────────────────────────────────────────

    @property
    def ranked(self) -> list[str]:
        """The names currently shown, in display order."""
        return list(self._ranked)

    @property
    def directory(self) -> str:
        return self.query_one("#directory-input", Input).value

    @property
    def selected_name(self) -> str:
        """The highlighted candidate, or ``""`` when nothing is selected."""
        option_list = self.query_one("#file-list", OptionList)
        index = option_list.highlighted
        if index is None or not self._ranked:
            return ""
        option = option_list.get_option_at_index(index)
        return option.id or ""

    def _refresh_candidates(self, directory: str) -> None:
        self._ranked = rank(scan_directory(directory))
        option_list = self.query_one("#file-list", OptionList)
        option_list.clear_options()
        option_list.add_options([Option(Text(name), id=name) for name in self._ranked])
        option_list.highlighted = pick_selection(self._ranked, self._preferred_name)
        logger.debug("scanned %r: %d candidate(s)", directory, len(self._ranked))

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "directory-input":
            self._refresh_candidates(event.value)

    def on_option_list_option_highlighted(
        self, event: OptionList.OptionHighlighted
    ) -> None:
        if event.option.id is not None:
            self._preferred_name = event.option.id

    # ── Pin ─────────────────────────────────────────────────────

    @property
    def pinned(self) -> bool:
        return self.query_one("#pin", Checkbox).value

    def _apply_pin(self, pin: bool) -> None:
        # A terminal can't float above other windows; just show the state.
        self.sub_title = "pinned" if pin else ""
        self.set_class(pin, "pinned")

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        if event.checkbox.id == "pin":
            self._apply_pin(event.value)

    def action_toggle_pin(self) -> None:
        self.query_one("#pin", Checkbox).toggle()

    # ── Actions ─────────────────────────────────────────────────

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "overwrite":
            self.action_overwrite()
        elif event.button.id == "browse":
            self.action_browse()

    def action_rescan(self) -> None:
        self._refresh_candidates(self.directory)

    def action_browse(self) -> None:
        """Pick a folder in a modal; cancelling keeps the current one."""
        current = Path(self.directory) if self.directory else Path.cwd()
        start = current if current.is_dir() else Path.cwd()
        self.push_screen(FolderPickerScreen(start), self._on_folder_chosen)

    def _on_folder_chosen(self, folder: Path | None) -> None:
        if folder is None:
            return
        self.query_one("#directory-input", Input).value = str(folder)
        self._refresh_candidates(str(folder))

    def action_overwrite(self) -> WorkflowResult:
        """Copy the selected save over the active one and remember the choice."""
        outcome = self._workflow.run(self.directory, self.selected_name, self.pinned)
        status = self.query_one("#status", StatusLine)
        status.flash(
            STATUS_SUCCESS if outcome.promote.ok else STATUS_FAILED,
            ok=outcome.promote.ok,
            seconds=self._prefs.status_clear_seconds,
        )
        if not outcome.config_saved:
            self.notify(
                escape(f"Could not save settings to {self._store.path}"),
                severity="warning",
            )
        self._refresh_candidates(self.directory)
        return outcome


def run_app(store: ConfigStore, prefs: Preferences | None = None) -> None:
    """Run the Save Switcher application."""
    app = SaveSwitcherApp(store, prefs=prefs)
    app.run()
