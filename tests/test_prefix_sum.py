import pytest

from leetsolve.prefix_sum import largest_altitude, pivot_index


@pytest.mark.parametrize(
    ("gain", "expected"),
    [
        ([-5, 1, 5, 0, -7], 1),
        ([-4, -3, -2, -1, 4, 3, 2], 0),
    ],
)
def test_largest_altitude(gain, expected):
    assert largest_altitude(gain) == expected


def test_largest_altitude_empty_trip_stays_at_start():
    assert largest_altitude([]) == 0


def test_largest_altitude_single_climb():
    assert largest_altitude([7]) == 7


@pytest.mark.parametrize(
    ("nums", "expected"),
    [
        ([1, 7, 3, 6, 5, 6], 3),
        ([1, 2, 3], -1),
        ([2, 1, -1], 0),
    ],
)
def test_pivot_index(nums, expected):
    assert pivot_index(nums) == expected


def test_pivot_index_empty():
    assert pivot_index([]) == -1


def test_pivot_index_single_element():
    assert pivot_index([5]) == 0


def test_pivot_index_is_leftmost():
    assert pivot_index([0, 0, 0]) == 0