"""Promoter region extraction."""

import string

_LOWERCASE = frozenset(string.ascii_lowercase)


def extract_promoter(sequence: str) -> str:
    """Return the promoter region of a gene sequence.

    The promoter is the lowercase part of the sequence: lowercase ASCII
    letters are kept in their original order and everything else
    (coding-region uppercase, digits, punctuation) is dropped.
    """
    return "".join(c for c in sequence if c in _LOWERCASE)
