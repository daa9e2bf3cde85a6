"""Problems solved with a stack."""

from __future__ import annotations


def remove_stars(s: str) -> str:
    """Remove each star together with the closest non-star character to its left.

    Raises IndexError when a star has nothing left of it to remove.
    """
    stack: list[str] = []
    for ch in s:
        if ch == "*":
            if not stack:
                raise IndexError("star with no character to remove")
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)


def asteroid_collision(asteroids: list[int]) -> list[int]:
    """Return the asteroids left after all collisions.

    Positive values move right, negative left; on collision the smaller one
    explodes, and both explode when equal in size.
    """
    survivors: list[int] = []
    for asteroid in asteroids:
        alive = True
        while alive and asteroid < 0 and survivors and survivors[-1] > 0:
            top = survivors[-1]
            if top < -asteroid:
                survivors.pop()
            elif top == -asteroid:
                survivors.pop()
                alive = False
            else:
                alive = False
        if alive:
            survivors.append(asteroid)
    return survivors