"""Base-10000 limb arrays and the long-division steps that fill them.

A limb array for ``words`` limbs is a plain list of ``words + 2`` ints:

* index ``SENTINEL`` (0) absorbs the final carry or borrow and is never read
  back as a digit group,
* index ``HEAD`` (1) is the most significant limb, in units of 0.1,
* index ``k`` for ``HEAD < k <= words`` is in units of ``10 ** -(4 * k - 3)``,
* index ``words + 1`` is a zero pad so the word-skipping check of the series
  evaluators can look one limb past the end.
"""
from typing import Iterator, List, Tuple


LIMB_BASE = 10000
LIMB_DIGITS = 4
SENTINEL = 0
HEAD = 1


def word_count(digit_count: int) -> int:
    return digit_count // LIMB_DIGITS + 3


def allocate(words: int) -> List[int]:
    return [0] * (words + 2)


def carry_divide(remainder: int, limb: int, divisor: int) -> Tuple[int, int]:
    """One step of long division: bring ``limb`` down next to ``remainder``.

    Returns ``(quotient, remainder)`` for this limb position.
    """
    return divmod(remainder * LIMB_BASE + limb, divisor)


def long_division(dividend: int, divisor: int, count: int) -> Iterator[int]:
    """Yield ``count`` quotient limbs of ``dividend / divisor``.

    ``dividend`` is expressed in units of the first yielded limb; every later
    limb continues from the remainder of the previous one.
    """
    remainder = 0
    limb = dividend
    for _ in range(count):
        quotient, remainder = divmod(remainder * LIMB_BASE + limb, divisor)
        limb = 0
        yield quotient


def add_quotients(limbs: List[int], start: int, stop: int, dividend: int, divisor: int, sign: int = 1) -> None:
    count = stop - start + 1
    for x, quotient in zip(range(start, stop + 1), long_division(dividend, divisor, count)):
        limbs[x] += sign * quotient


def fill_quotients(limbs: List[int], start: int, stop: int, dividend: int, divisor: int) -> None:
    limbs[start : stop + 1] = long_division(dividend, divisor, stop - start + 1)


def subtract_limbs(target: List[int], source: List[int], start: int, stop: int) -> None:
    for x in range(start, stop + 1):
        target[x] -= source[x]
