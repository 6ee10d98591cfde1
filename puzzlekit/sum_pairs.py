"""Counting pairs across two lists that add up to a total."""

from collections import Counter


class FindSumPairs:
    """Pairs ``(i, j)`` with ``nums1[i] + nums2[j] == tot``; ``nums2`` may change."""

    def __init__(self, nums1, nums2):
        self._nums1 = sorted(nums1)
        self._nums2 = list(nums2)
        self._frequency = Counter(self._nums2)

    def add(self, index, val):
        """Add ``val`` to ``nums2[index]``."""
        if not 0 <= index < len(self._nums2):
            raise IndexError(f"index {index} out of range")
        old_value = self._nums2[index]
        self._frequency[old_value] -= 1
        if self._frequency[old_value] <= 0:
            del self._frequency[old_value]
        new_value = old_value + val
        self._nums2[index] = new_value
        self._frequency[new_value] += 1

    def count(self, tot):
        """Return the number of pairs summing to ``tot``.

        Only values of ``nums1`` below ``tot`` are considered.
        """
        total = 0
        for value in self._nums1:
            if value >= tot:
                break
            total += self._frequency.get(tot - value, 0)
        return total