from typing import Iterable, Iterator, List

from .limbs import HEAD


# pi's integer digit and first decimal: the value held by the HEAD limb
PREFIX_DIGITS = (3, 1)
PLACES = (1000, 100, 10, 1)


def iter_limb_digits(limbs: List[int], words: int) -> Iterator[int]:
    yield from PREFIX_DIGITS
    for limb in limbs[HEAD + 1 : words + 1]:
        for place in PLACES:
            yield limb // place % 10


def one_each(limbs: List[int], words: int, digit_count: int) -> bytes:
    out = bytearray(digit_count)
    for i, digit in zip(range(digit_count), iter_limb_digits(limbs, words)):
        out[i] = digit
    return bytes(out)


def pack(digits: Iterable[int]) -> bytes:
    """Pack decimal digits two per cell as ``10 * high + low``.

    An odd trailing digit is packed with a low digit of 0.
    """
    out = bytearray()
    high = None
    for digit in digits:
        if high is None:
            high = digit
        else:
            out.append(high * 10 + digit)
            high = None
    if high is not None:
        out.append(high * 10)
    return bytes(out)


def unpack_packed(cells: Iterable[int], digit_count: int) -> bytes:
    out = bytearray()
    for cell in cells:
        out.extend(divmod(cell, 10))
    return bytes(out[:digit_count])


def packed(limbs: List[int], words: int, digit_count: int) -> bytes:
    return pack(one_each(limbs, words, digit_count))


def decimal_string(digits: bytes) -> str:
    text = "".join(str(d) for d in digits)
    if len(text) <= 1:
        return text
    return text[0] + "." + text[1:]
