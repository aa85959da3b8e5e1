"""Small helpers for model text and string lists."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

_ASSERTION_PREFIX = re.compile(r"([| =)(&<>,+\-!*/])([rp])\.")


def escape_assertion(s: str) -> str:
    """Replace the dot after ``r``/``p`` prefixes so names are valid identifiers."""
    if s.startswith(("r", "p")):
        s = s.replace(".", "_", 1)
    return _ASSERTION_PREFIX.sub(r"\1\2_", s)


def remove_comments(s: str) -> str:
    """Strip a trailing ``#`` comment from the text."""
    pos = s.find("#")
    if pos == -1:
        return s
    return s[:pos].strip()


def array_equals(a: Sequence[str], b: Sequence[str]) -> bool:
    """Tell whether two string sequences are identical, element by element."""
    return list(a) == list(b)


def array_2d_equals(a: Sequence[Sequence[str]], b: Sequence[Sequence[str]]) -> bool:
    """Tell whether two sequences of string sequences are identical."""
    return len(a) == len(b) and all(array_equals(x, y) for x, y in zip(a, b))


def array_remove_duplicates(items: Iterable[str]) -> list[str]:
    """Return the items without repeats, keeping the first occurrence order."""
    return list(dict.fromkeys(items))


def array_to_string(items: Iterable[str]) -> str:
    """Join the items with a comma and a space."""
    return ", ".join(items)


def params_to_string(*args: str) -> str:
    """Join the arguments with a comma and a space."""
    return ", ".join(args)


def set_equals(a: Sequence[str], b: Sequence[str]) -> bool:
    """Tell whether two string sequences hold the same elements in any order."""
    return len(a) == len(b) and sorted(a) == sorted(b)


def join_slice(a: str, *args: str) -> list[str]:
    """Return a new list of ``a`` followed by the other arguments."""
    return [a, *args]


def set_subtract(a: Iterable[str], b: Iterable[str]) -> list[str]:
    """Return the elements of ``a`` that are not in ``b``, in order."""
    excluded = set(b)
    return [x for x in a if x not in excluded]