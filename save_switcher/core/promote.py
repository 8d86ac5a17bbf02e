"""Promote a candidate save to the active slot.

:func:`promote` copies ``<directory>/<name>`` over ``<directory>/bf2savefile.sav``.
:class:`PromoteWorkflow` runs the copy and then always records the user's
directory, selection and pin flag, so a failed promote does not lose them.

The copy and the config write are independent: if the process dies between
them, the saved state may describe a promote that never happened.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..constants import ACTIVE_SAVE_NAME
from ..log import logger
from ..persistence import ConfigStore, PersistedState


class PromoteOutcome(Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class PromoteError(Enum):
    """Why a promote failed."""

    NO_SELECTION = "no_selection"
    SOURCE_MISSING = "source_missing"
    COPY_FAILED = "copy_failed"


@dataclass(frozen=True)
class PromoteResult:
    outcome: PromoteOutcome
    reason: PromoteError | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is PromoteOutcome.SUCCESS

    @classmethod
    def success(cls) -> PromoteResult:
        return cls(PromoteOutcome.SUCCESS)

    @classmethod
    def failure(cls, reason: PromoteError, detail: str = "") -> PromoteResult:
        return cls(PromoteOutcome.FAILURE, reason, detail)


def _replace_with_copy(src: Path, dest: Path) -> None:
    """Copy *src* to a temp file beside *dest*, then swap it into place.

    Readers of *dest* see either the old or the new content, never a mix.
    """
    fd, tmp_name = tempfile.mkstemp(prefix=".switch-", suffix=".tmp", dir=dest.parent)
    os.close(fd)
    tmp = Path(tmp_name)
    try:
        shutil.copyfile(src, tmp)
        # mkstemp creates 0600; give the active save the source's mode.
        shutil.copymode(src, tmp)
        os.replace(tmp, dest)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


def promote(directory: str | os.PathLike[str], chosen_name: str) -> PromoteResult:
    """Make *chosen_name* the active save in *directory*.

    The source is checked again here because the directory may have
    changed since it was scanned.
    """
    if not chosen_name:
        return PromoteResult.failure(PromoteError.NO_SELECTION, "no file selected")

    folder = Path(directory)
    src = folder / chosen_name
    dest = folder / ACTIVE_SAVE_NAME
    if not src.exists():
        logger.info("promote source missing: %s", src)
        return PromoteResult.failure(PromoteError.SOURCE_MISSING, f"{src} not found")

    try:
        _replace_with_copy(src, dest)
    except OSError as exc:
        logger.warning("failed to copy %s -> %s: %s", src, dest, exc)
        return PromoteResult.failure(PromoteError.COPY_FAILED, str(exc))

    logger.info("promoted %s -> %s", src, dest)
    return PromoteResult.success()


@dataclass(frozen=True)
class WorkflowResult:
    """Outcome of one promote attempt plus whether the state was saved."""

    promote: PromoteResult
    config_saved: bool
    state: PersistedState = field(default_factory=PersistedState)

    @property
    def ok(self) -> bool:
        return self.promote.ok and self.config_saved


class PromoteWorkflow:
    """Promote, then persist the session state whatever the outcome."""

    def __init__(self, store: ConfigStore) -> None:
        self.store = store

    def run(
        self,
        directory: str | os.PathLike[str],
        chosen_name: str,
        pin: bool,
    ) -> WorkflowResult:
        result = promote(directory, chosen_name)
        state = PersistedState(
            directory=os.fspath(directory),
            file_name=chosen_name,
            pin=pin,
        )
        saved = self.store.save(state)
        return WorkflowResult(promote=result, config_saved=saved, state=state)
