import pytest

from puzzlekit.lucky import find_lucky


def test_worked_example():
    assert find_lucky([2, 2, 3, 4]) == 2


def test_largest_lucky_wins():
    assert find_lucky([1, 2, 2, 3, 3, 3]) == 3


def test_no_lucky_number():
    assert find_lucky([2, 2, 2, 3, 3]) == -1


def test_empty_input():
    assert find_lucky([]) == -1


def test_single_one():
    assert find_lucky([1]) == 1


def test_one_seen_twice_is_not_lucky():
    assert find_lucky([1, 1]) == -1


@pytest.mark.parametrize(
    "arr",
    [[5, 5, 5, 5, 5, 1], [4, 4, 4, 4, 2, 2, 7], [3, 1, 3, 3, 2, 2]],
)
def test_result_occurs_as_often_as_its_value(arr):
    result = find_lucky(arr)
    assert arr.count(result) == result


def test_order_does_not_matter():
    arr = [3, 2, 3, 2, 3, 4]
    assert find_lucky(arr) == find_lucky(sorted(arr))