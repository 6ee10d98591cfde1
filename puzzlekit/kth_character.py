"""The k-th character of a string that keeps growing by shifted copies."""

_FIRST = "a"
_LAST = "z"


def _shift(char):
    """Return the next lowercase letter, wrapping from ``z`` to ``a``."""
    following = ord(char) + 1
    if following > ord(_LAST):
        return _FIRST
    return chr(following)


def kth_character(k):
    """Return the ``k``-th character (1-based) of the generated word.

    The word starts as ``"a"``; while it is shorter than ``k``, every
    character is shifted to the next letter and the result is appended.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    word = _FIRST
    while len(word) < k:
        word += "".join(_shift(c) for c in word)
    return word[k - 1]