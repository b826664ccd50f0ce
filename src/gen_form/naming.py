"""
Slug and name allocation helpers.

Field names are derived from free-text labels. Both helpers are pure so the
store can call them with the current set of names and tests can call them
without a store.
"""

import re
from typing import Iterable

_WHITESPACE_RUN = re.compile(r"\s+")


def slugify(text: str) -> str:
    """
    Lower-case ``text`` and replace each run of whitespace with ``_``.

    Punctuation is kept as-is: ``"Email (work)"`` becomes ``"email_(work)"``.
    """
    return _WHITESPACE_RUN.sub("_", text.lower())


def allocate_unique(candidate: str, existing: Iterable[str]) -> str:
    """
    Return ``candidate`` if it is not taken, otherwise the first free
    ``candidate_1``, ``candidate_2``, ...

    Example:
        >>> allocate_unique("email", {"email", "email_1"})
        'email_2'
    """
    taken = set(existing)
    if candidate not in taken:
        return candidate

    counter = 1
    while f"{candidate}_{counter}" in taken:
        counter += 1
    return f"{candidate}_{counter}"
