"""Core logic: discovery, natural ranking and promotion.

Nothing in here imports Textual; the app and the CLI both sit on top.
"""

from .natural_sort import natural_compare, natural_key
from .promote import (
    PromoteError,
    PromoteOutcome,
    PromoteResult,
    PromoteWorkflow,
    WorkflowResult,
    promote,
)
from .ranking import pick_selection, rank
from .scanner import scan_directory

__all__ = [
    "PromoteError",
    "PromoteOutcome",
    "PromoteResult",
    "PromoteWorkflow",
    "WorkflowResult",
    "natural_compare",
    "natural_key",
    "pick_selection",
    "promote",
    "rank",
    "scan_directory",
]
