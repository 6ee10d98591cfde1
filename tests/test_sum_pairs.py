import pytest

from puzzlekit.sum_pairs import FindSumPairs

NUMS1 = [1, 1, 2, 2, 2, 3]
NUMS2 = [1, 4, 5, 2, 5, 4]


def test_worked_example():
    pairs = FindSumPairs([9, 70, 14, 9, 76], [26, 26, 58, 23, 74, 68, 68, 78, 58, 26])
    pairs.add(6, 10)
    pairs.add(5, 6)
    assert pairs.count(32) == 2


def test_count_before_updates():
    pairs = FindSumPairs(NUMS1, NUMS2)
    assert pairs.count(7) == 8


def test_count_after_updates():
    pairs = FindSumPairs(NUMS1, NUMS2)
    pairs.add(3, 2)
    pairs.add(0, 1)
    pairs.add(1, 1)
    assert pairs.count(7) == 11


def test_adding_zero_keeps_counts():
    pairs = FindSumPairs(NUMS1, NUMS2)
    before = [pairs.count(t) for t in range(2, 12)]
    pairs.add(2, 0)
    assert [pairs.count(t) for t in range(2, 12)] == before


def test_add_then_undo_restores_counts():
    pairs = FindSumPairs(NUMS1, NUMS2)
    before = [pairs.count(t) for t in range(2, 12)]
    pairs.add(4, 9)
    pairs.add(4, -9)
    assert [pairs.count(t) for t in range(2, 12)] == before


def test_total_not_above_smallest_gives_nothing():
    pairs = FindSumPairs(NUMS1, [-5, 0, 1])
    assert pairs.count(min(NUMS1)) == pairs.count(-100)


def test_input_lists_are_not_modified():
    nums1 = [3, 1, 2]
    nums2 = [4, 5]
    pairs = FindSumPairs(nums1, nums2)
    pairs.add(0, 3)
    assert nums1 == [3, 1, 2]
    assert nums2 == [4, 5]


def test_update_equivalent_to_fresh_instance():
    updated = FindSumPairs(NUMS1, NUMS2)
    updated.add(1, 3)
    fresh = FindSumPairs(NUMS1, [1, 7, 5, 2, 5, 4])
    assert [updated.count(t) for t in range(2, 12)] == [fresh.count(t) for t in range(2, 12)]


@pytest.mark.parametrize("index", [-1, 6, 100])
def test_bad_index_raises(index):
    pairs = FindSumPairs(NUMS1, NUMS2)
    with pytest.raises(IndexError):
        pairs.add(index, 1)