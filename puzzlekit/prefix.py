"""Longest common prefix of a list of strings."""


def longest_common_prefix(strs):
    """Return the longest prefix shared by every string in ``strs``.

    A single string is its own prefix; an empty list yields ``""``.
    """
    if len(strs) == 1:
        return strs[0]
    prefix = []
    for column in zip(*strs):
        if len(set(column)) != 1:
            break
        prefix.append(column[0])
    return "".join(prefix)