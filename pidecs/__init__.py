__all__ = [
    "PiDecimals",
    "PiState",
    "generate",
    "digits_one_each",
    "digits_packed",
    "unpack_packed",
    "pi_decimal_string",
    "reference_digits",
    "verify_digits",
    "serialize_payload",
]

from .engine import PiDecimals, PiState, digits_one_each, digits_packed, generate, pi_decimal_string
from .formats import serialize_payload
from .serialize import unpack_packed
from .verify import reference_digits, verify_digits
