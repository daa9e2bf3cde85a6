import pytest

from leetsolve.stacks import asteroid_collision, remove_stars


@pytest.mark.parametrize(
    ("s", "expected"),
    [
        ("leet**cod*e", "lecoe"),
        ("erase*****", ""),
    ],
)
def test_remove_stars(s, expected):
    assert remove_stars(s) == expected


def test_remove_stars_without_stars():
    assert remove_stars("abc") == "abc"


def test_remove_stars_too_many_stars():
    with pytest.raises(IndexError):
        remove_stars("a**")


@pytest.mark.parametrize(
    ("asteroids", "expected"),
    [
        ([5, 10, -5], [5, 10]),
        ([8, -8], []),
        ([10, 2, -5], [10]),
        ([2, 3, 4, -5, 1, 3], [-5, 1, 3]),
        ([-2, -2, 1, -2], [-2, -2, -2]),
    ],
)
def test_asteroid_collision(asteroids, expected):
    assert asteroid_collision(asteroids) == expected


def test_asteroid_collision_moving_apart():
    assert asteroid_collision([-1, 1]) == [-1, 1]


def test_asteroid_collision_leaves_input_unchanged():
    asteroids = [5, -5]
    asteroid_collision(asteroids)
    assert asteroids == [5, -5]