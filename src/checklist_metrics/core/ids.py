"""Item id normalization.

Every component that turns display text into a lookup key goes through
``normalize`` so the rule lives in one place.
"""
from __future__ import annotations


def normalize(point: str) -> str:
    """Return the lookup id for ``point``.

    Lower-cases the text and replaces each space character with a
    hyphen.  Nothing else is touched: no trimming, no punctuation
    handling, other whitespace passes through.

    Example
    -------
    ::

        >>> normalize("Use Strong Passwords")
        'use-strong-passwords'
    """
    return point.lower().replace(" ", "-")
