"""Longest "nice" substring: every letter appears in both cases."""


def _counterpart(char):
    if char.isascii() and char.isalpha():
        return char.swapcase()
    return char


def longest_nice_substring(s):
    """Return the longest nice substring of ``s``, earliest on ties.

    A string is nice when every ASCII letter in it appears in both upper
    and lower case. Strings of one character or fewer yield ``""``.
    """
    if len(s) <= 1:
        return ""
    letters = set(s)
    bad = next((c for c in letters if _counterpart(c) not in letters), None)
    if bad is None:
        return s
    best = ""
    for piece in s.split(bad):
        candidate = longest_nice_substring(piece)
        if len(candidate.encode("utf-8")) > len(best.encode("utf-8")):
            best = candidate
    return best