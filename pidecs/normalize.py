from typing import List

from .limbs import HEAD, LIMB_BASE


def normalize(total: List[int], words: int) -> None:
    """Release carries and borrows so limbs ``HEAD..words`` lie in [0, 9999].

    One sweep from the least significant limb is enough: accumulation leaves
    every limb within a few multiples of the base, and each fix only touches
    the next more significant limb, which is visited afterwards.
    """
    for x in range(words, HEAD - 1, -1):
        if not 0 <= total[x] < LIMB_BASE:
            carry, total[x] = divmod(total[x], LIMB_BASE)
            total[x - 1] += carry


def is_normalized(total: List[int], words: int) -> bool:
    return all(0 <= limb < LIMB_BASE for limb in total[HEAD : words + 1])
