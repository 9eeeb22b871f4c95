import itertools
import math
import random
from typing import Iterator, List, Optional, Sequence, Tuple, TypeAlias

import structlog

from prime_catacombs.digits import from_digits, to_digits, validate_base
from prime_catacombs.models.catacomb_number import CatacombNumber
from prime_catacombs.utils import validate_hamming_distance


log = structlog.get_logger()

# ((position, new_digit), ...) with distinct positions in ascending order.
Perturbation: TypeAlias = Tuple[Tuple[int, int], ...]


def padded_digits(value: int, base: int, hamming_distance: int) -> List[int]:
    """Digits of `value` plus one zero guard digit per unit of Hamming distance."""
    return to_digits(value, base, guard_digits=hamming_distance)


def iter_perturbations(digits: Sequence[int], base: int, hamming_distance: int) -> Iterator[Perturbation]:
    """Yield every way of changing exactly `hamming_distance` digits.

    Positions are chosen in combination order; for each choice the new
    digits run through [0, base) skipping the original digit, with the
    last chosen position varying fastest.
    """
    for positions in itertools.combinations(range(len(digits)), hamming_distance):
        candidates = [
            [(position, d) for d in range(base) if d != digits[position]]
            for position in positions
        ]
        yield from itertools.product(*candidates)


def apply_perturbation(digits: Sequence[int], perturbation: Perturbation) -> List[int]:
    new_digits = list(digits)
    for position, digit in perturbation:
        new_digits[position] = digit
    return new_digits


def iter_catacombs(
    value: int,
    base: int,
    hamming_distance: int = 1,
    rng: Optional[random.Random] = None,
) -> Iterator[CatacombNumber]:
    """Lazily compute the catacomb numbers at `hamming_distance` from `value`."""
    validate_base(base)
    validate_hamming_distance(hamming_distance)

    original_digits = padded_digits(value, base, hamming_distance)
    for perturbation in iter_perturbations(original_digits, base, hamming_distance):
        number = from_digits(apply_perturbation(original_digits, perturbation), base)
        yield CatacombNumber(number, rng)


def compute_catacombs(
    value: int,
    base: int,
    hamming_distance: int = 1,
    rng: Optional[random.Random] = None,
) -> List[CatacombNumber]:
    """Compute all of the catacomb numbers for the given input."""
    catacombs = list(iter_catacombs(value, base, hamming_distance, rng))
    log.debug(
        "catacombs computed",
        value=value,
        base=base,
        hamming_distance=hamming_distance,
        count=len(catacombs),
    )
    return catacombs


def expected_neighbor_count(value: int, base: int, hamming_distance: int) -> int:
    """C(len, H) * (base - 1)^H, where len counts the guard digits."""
    length = len(padded_digits(value, base, hamming_distance))
    return math.comb(length, hamming_distance) * (base - 1) ** hamming_distance
