"""Number-aware, separator-blind, case-insensitive name comparison.

``save2`` sorts before ``save10`` because digit runs are compared as
numbers.  When two runs have the same value the shorter one wins, so
``save2`` also sorts before ``save02``.  Separator characters (space,
underscore, hyphen, period) are skipped on both sides and never compared,
which makes ``bf2savefile_10.sav`` and ``bf2savefile-10.sav`` equal.

This module has **no I/O** -- it only compares strings.
"""

from __future__ import annotations

import functools

from ..constants import SEPARATORS

_DIGITS = frozenset("0123456789")


def _skip_separators(s: str, i: int) -> int:
    n = len(s)
    while i < n and s[i] in SEPARATORS:
        i += 1
    return i


def _digit_run_end(s: str, i: int) -> int:
    n = len(s)
    while i < n and s[i] in _DIGITS:
        i += 1
    return i


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


def natural_compare(a: str, b: str) -> int:
    """Compare *a* and *b* in natural order.

    Returns a negative, zero or positive int like a classic ``cmp``.
    """
    i = j = 0
    na, nb = len(a), len(b)
    while True:
        i = _skip_separators(a, i)
        j = _skip_separators(b, j)
        if i >= na or j >= nb:
            # Fewer characters left sorts first; both exhausted is a tie.
            # Separators were skipped first, so "a" and "a_" are equal here.
            return _sign((na - i) - (nb - j))

        if a[i] in _DIGITS and b[j] in _DIGITS:
            ia = _digit_run_end(a, i)
            jb = _digit_run_end(b, j)
            va, vb = int(a[i:ia]), int(b[j:jb])
            if va != vb:
                return -1 if va < vb else 1
            len_a, len_b = ia - i, jb - j
            if len_a != len_b:
                return -1 if len_a < len_b else 1
            i, j = ia, jb
            continue

        ca, cb = a[i].lower(), b[j].lower()
        if ca != cb:
            return -1 if ca < cb else 1
        i += 1
        j += 1


#: Sort key wrapper, e.g. ``sorted(names, key=natural_key)``.
natural_key = functools.cmp_to_key(natural_compare)
