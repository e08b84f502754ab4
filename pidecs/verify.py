from typing import Iterator, Tuple

from mpmath import mp


REFERENCES = ("mpmath", "spigot")


def pi_digits_spigot() -> Iterator[int]:
    q, r, t, k, n, l = 1, 0, 1, 1, 3, 3
    while True:
        if 4 * q + r - t < n * t:
            yield n
            q, r, n = 10 * q, 10 * (r - n * t), ((10 * (3 * q + r)) // t) - 10 * n
        else:
            q, r, t, k, n, l = (
                q * k,
                (2 * q + r) * l,
                t * l,
                k + 1,
                (q * (7 * k + 2) + r * l) // (t * l),
                l + 2,
            )


def _spigot_digits(count: int) -> bytes:
    g = pi_digits_spigot()
    return bytes(next(g) for _ in range(count))


def _mpmath_digits(count: int) -> bytes:
    mp.dps = count + 20
    s = mp.nstr(mp.pi, count + 10, strip_zeros=False).replace(".", "")
    return bytes(int(ch) for ch in s[:count])


def reference_digits(count: int, reference: str = "mpmath") -> bytes:
    count = int(count)
    if count < 0:
        raise ValueError("count must be >= 0")
    reference = (reference or "mpmath").lower().strip()
    if reference == "mpmath":
        return _mpmath_digits(count)
    if reference == "spigot":
        return _spigot_digits(count)
    raise ValueError("unsupported reference")


def verify_digits(digits: bytes, samples: int, reference: str = "mpmath") -> Tuple[bool, str, int]:
    samples = min(int(samples), len(digits))
    if samples <= 0:
        return True, "verification skipped", -1
    expected = reference_digits(samples, reference)
    for i, (want, got) in enumerate(zip(expected, digits)):
        if want != got:
            return False, f"pi {reference}", i
    return True, f"pi {reference}", -1
