"""Ordering of scanned candidates for display."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .natural_sort import natural_key


def rank(names: Iterable[str]) -> list[str]:
    """Return *names* in natural order.

    ``sorted`` is stable, so names the comparator considers equal (case or
    separator variants) keep their input order.
    """
    return sorted(names, key=natural_key)


def pick_selection(ranked: Sequence[str], saved_name: str = "") -> int | None:
    """Choose which entry of *ranked* to pre-select.

    An exact match of *saved_name* wins, then the first entry starting with
    it (case-insensitive, like a combo box's select-string), then the first
    entry.  Returns ``None`` when there is nothing to select.
    """
    if not ranked:
        return None
    if saved_name:
        if saved_name in ranked:
            return ranked.index(saved_name)
        folded = saved_name.lower()
        for index, name in enumerate(ranked):
            if name.lower().startswith(folded):
                return index
    return 0
