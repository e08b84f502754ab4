import numbers
from dataclasses import dataclass
from typing import List, Optional

from .limbs import allocate, word_count
from .normalize import normalize
from .serialize import decimal_string, one_each, packed
from .series import accumulate_pi


@dataclass(frozen=True)
class PiState:
    digit_count: int
    words: int
    limbs: List[int]


def _check_digit_count(digit_count) -> int:
    if isinstance(digit_count, bool) or not isinstance(digit_count, numbers.Integral):
        raise TypeError("digit_count must be an integer")
    digit_count = int(digit_count)
    if digit_count < 1:
        raise ValueError("digit_count must be >= 1")
    return digit_count


def generate(digit_count: int) -> PiState:
    digit_count = _check_digit_count(digit_count)
    words = word_count(digit_count)
    total = allocate(words)
    term = allocate(words)
    accumulate_pi(total, term, words)
    normalize(total, words)
    return PiState(digit_count, words, total)


def digits_one_each(state: PiState) -> bytes:
    return one_each(state.limbs, state.words, state.digit_count)


def digits_packed(state: PiState) -> bytes:
    return packed(state.limbs, state.words, state.digit_count)


def pi_decimal_string(digit_count: int) -> str:
    return decimal_string(digits_one_each(generate(digit_count)))


class PiDecimals:
    """Keeps the last generated limbs so both encodings can be read from one run."""

    def __init__(self):
        self.state: Optional[PiState] = None

    def decimals(self, digit_count: int) -> bytes:
        self.state = generate(digit_count)
        return digits_one_each(self.state)

    def cents(self, digit_count: int) -> bytes:
        self.state = generate(digit_count)
        return digits_packed(self.state)

    def also_cents(self) -> bytes:
        if self.state is None:
            raise RuntimeError("call decimals() or cents() first")
        return digits_packed(self.state)
