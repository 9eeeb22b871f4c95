"""Entry points shared by the CLI and the HTTP API.

Both take the caller's text and options, validate everything up front,
and hand back plain values ready to be rendered.
"""
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from prime_catacombs.digits import validate_base
from prime_catacombs.explorer import (
    DEFAULT_BASE,
    DEFAULT_HAMMING_DISTANCE,
    DEFAULT_MAX_EXPANSIONS,
    Exploration,
    Explorer,
)
from prime_catacombs.models.catacomb_number import CatacombNumber
from prime_catacombs.neighbors import compute_catacombs, expected_neighbor_count
from prime_catacombs.state_queue import SnapshotChannel
from prime_catacombs.state_snapshot import ExplorerSnapshot
from prime_catacombs.utils import (
    NeighborhoodTooLargeError,
    parse_number,
    validate_hamming_distance,
)


@dataclass(frozen=True, slots=True)
class CatacombsResult:
    value: int
    base: int
    hamming_distance: int
    catacombs: Tuple[CatacombNumber, ...] = field(default_factory=tuple)

    @property
    def dead_end(self) -> bool:
        """True when no neighbor is prime, so a walk cannot continue from here."""
        return not any(c.is_prime for c in self.catacombs)

    def to_list(self) -> List[dict]:
        return [c.to_dict() for c in self.catacombs]


def make_rng(random_seed: Optional[int]) -> Optional[random.Random]:
    if random_seed is None:
        return None
    return random.Random(random_seed)


def check_neighborhood(
    value: int,
    base: int,
    hamming_distance: int,
    max_neighbors: Optional[int],
) -> None:
    """Refuse to generate more than `max_neighbors` candidates for one number."""
    if max_neighbors is None:
        return
    count = expected_neighbor_count(value, base, hamming_distance)
    if count > max_neighbors:
        raise NeighborhoodTooLargeError(
            f"{value} has {count} neighbors at distance {hamming_distance} in base {base}"
            f" (limit {max_neighbors})"
        )


def query_catacombs(
    number_text: str,
    base: int = DEFAULT_BASE,
    hamming_distance: int = DEFAULT_HAMMING_DISTANCE,
    *,
    primes_only: bool = False,
    random_seed: Optional[int] = None,
    max_neighbors: Optional[int] = None,
) -> CatacombsResult:
    """Compute the catacombs of a number given as base-10 text."""
    value = parse_number(number_text)
    validate_base(base)
    validate_hamming_distance(hamming_distance)
    check_neighborhood(value, base, hamming_distance, max_neighbors)

    catacombs = compute_catacombs(value, base, hamming_distance, make_rng(random_seed))
    if primes_only:
        catacombs = [c for c in catacombs if c.is_prime]
    return CatacombsResult(
        value=value,
        base=base,
        hamming_distance=hamming_distance,
        catacombs=tuple(catacombs),
    )


def query_exploration(
    seed_text: str = "2",
    base: int = DEFAULT_BASE,
    hamming_distance: int = DEFAULT_HAMMING_DISTANCE,
    max_expansions: int = DEFAULT_MAX_EXPANSIONS,
    *,
    random_seed: Optional[int] = None,
    state_queue: Optional[SnapshotChannel[ExplorerSnapshot]] = None,
    max_neighbors: Optional[int] = None,
) -> Exploration:
    """Explore the catacombs breadth-first from a seed given as base-10 text."""
    try:
        seed = parse_number(seed_text)
        explorer = Explorer(base, hamming_distance, max_expansions, make_rng(random_seed))
        check_neighborhood(seed, base, hamming_distance, max_neighbors)
    except ValueError:
        if state_queue is not None:
            state_queue.close()
        raise
    return explorer.explore(seed, state_queue)
