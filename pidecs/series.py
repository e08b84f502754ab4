"""Fixed-point arctangent series for pi = 32 atan(1/10) - 4 atan(1/239) - 16 atan(1/515).

Every block function takes the active-word cursor ``first`` and returns the
advanced cursor. Within one series run the cursor never moves backwards; the
run ends once it passes the last limb.
"""
from typing import List

from .limbs import HEAD, LIMB_BASE, add_quotients, carry_divide, fill_quotients, subtract_limbs


FIRST_WORD = HEAD + 1
FIRST_DENOM = 3


def atan10_block(total: List[int], first: int, words: int, denom: int) -> int:
    # -x**denom / denom + x**(denom + 2) / (denom + 2), both scaled by 32
    add_quotients(total, first, words, 3200, denom, sign=-1)
    add_quotients(total, first, words, 32, denom + 2)
    return first + 1


def atan_squared_block(total: List[int], term: List[int], first: int, words: int, denom: int, square: int) -> int:
    """Advance ``term`` two series steps and fold both into ``total``.

    ``term[first]`` is below ``square`` so its quotient is zero: it is taken
    as the starting remainder instead of being divided.
    """
    grow, add_rem, shrink, sub_rem = term[first], 0, 0, 0
    first += 1
    for x in range(first, words + 1):
        value, grow = carry_divide(grow, term[x], square)
        quotient, add_rem = carry_divide(add_rem, value, denom)
        total[x] += quotient

        value, shrink = carry_divide(shrink, value, square)
        quotient, sub_rem = carry_divide(sub_rem, value, denom + 2)
        total[x] -= quotient
        term[x] = value

    first += 1
    if term[first] == 0:
        first += 1
    return first


def accumulate_atan10(total: List[int], words: int) -> None:
    total[HEAD] += 32
    first, denom = FIRST_WORD, FIRST_DENOM
    while first <= words:
        first = atan10_block(total, first, words, denom)
        denom += 4


def accumulate_atan_squared(total: List[int], term: List[int], words: int, n: int, coefficient: int) -> None:
    """Subtract ``coefficient * atan(1/n)`` from ``total``.

    ``term`` is overwritten from ``FIRST_WORD`` on; whatever an earlier run
    left there is discarded.
    """
    fill_quotients(term, FIRST_WORD, words, coefficient * 10 * LIMB_BASE, n)
    subtract_limbs(total, term, FIRST_WORD, words)
    first, denom = FIRST_WORD, FIRST_DENOM
    square = n * n
    while first < words:
        first = atan_squared_block(total, term, first, words, denom, square)
        denom += 4


def accumulate_atan239(total: List[int], term: List[int], words: int) -> None:
    accumulate_atan_squared(total, term, words, 239, 4)


def accumulate_atan515(total: List[int], term: List[int], words: int) -> None:
    accumulate_atan_squared(total, term, words, 515, 16)


def accumulate_pi(total: List[int], term: List[int], words: int) -> None:
    accumulate_atan10(total, words)
    accumulate_atan239(total, term, words)
    accumulate_atan515(total, term, words)
