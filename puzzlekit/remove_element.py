"""In-place removal of a value from a list."""


def remove_element(nums, val):
    """Move every element not equal to ``val`` to the front of ``nums``.

    The removed slots at the end are filled with zeros. Returns how many
    elements were kept.
    """
    kept = [n for n in nums if n != val]
    removed = len(nums) - len(kept)
    nums[:] = kept + [0] * removed
    return len(kept)