"""Lucky numbers: values that occur exactly as often as their value."""

from collections import Counter


def find_lucky(arr):
    """Return the largest value whose frequency equals itself, or -1."""
    counts = Counter(arr)
    lucky = [value for value, count in counts.items() if value == count]
    return max(lucky, default=-1)