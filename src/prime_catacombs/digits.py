from typing import List, Sequence

from prime_catacombs.utils import DigitRangeError, InvalidBaseError

MIN_BASE = 2
MAX_BASE = 256


def validate_base(base: int) -> int:
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBaseError(f"Base must be between {MIN_BASE} and {MAX_BASE} (given {base})")
    return base


def to_digits(value: int, base: int, guard_digits: int = 0) -> List[int]:
    """Little-endian digits of `value` in `base`, followed by `guard_digits` zeros.

    Zero is written as a single 0 digit, so every value has at least one slot.
    """
    validate_base(base)
    if value < 0:
        raise ValueError(f"Value must be non-negative (given {value})")
    if guard_digits < 0:
        raise ValueError(f"Guard digit count must be non-negative (given {guard_digits})")

    digits = []
    while True:
        value, digit = divmod(value, base)
        digits.append(digit)
        if value == 0:
            break

    digits.extend([0] * guard_digits)
    return digits


def from_digits(digits: Sequence[int], base: int) -> int:
    """Rebuild an integer from little-endian digits. Leading zeros are ignored."""
    validate_base(base)
    value = 0
    for position in reversed(range(len(digits))):
        digit = digits[position]
        if not 0 <= digit < base:
            raise DigitRangeError(f"Digit {digit} at position {position} is out of range for base {base}")
        value = value * base + digit
    return value


def format_digits(digits: Sequence[int], base: int) -> str:
    """Render digits most-significant first, e.g. 13 in base 2 as '1101'."""
    if base <= 36:
        alphabet = "0123456789abcdefghijklmnopqrstuvwxyz"
        return "".join(alphabet[d] for d in reversed(digits))
    return ":".join(f"{d:02x}" for d in reversed(digits))
