"""All subsets of a list."""


def subsets(nums):
    """Return every subset of ``nums``.

    Starting from the empty subset, each element in turn is appended to a
    copy of every subset built so far.
    """
    result = [[]]
    for num in nums:
        result += [subset + [num] for subset in result]
    return result