import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, List, Optional, Set, Tuple

import structlog

from prime_catacombs.digits import validate_base
from prime_catacombs.neighbors import iter_catacombs
from prime_catacombs.state_queue import SnapshotChannel
from prime_catacombs.state_snapshot import ExplorerSnapshot
from prime_catacombs.utils import validate_hamming_distance


log = structlog.get_logger()

DEFAULT_SEED = 2
DEFAULT_BASE = 2
DEFAULT_HAMMING_DISTANCE = 1
DEFAULT_MAX_EXPANSIONS = 1000
RECENT_DISCOVERIES = 20


class Termination(str, Enum):
    EXHAUSTED = "exhausted"
    BUDGET_EXCEEDED = "budget_exceeded"

    def __str__(self):
        return self.value


@dataclass(frozen=True, slots=True)
class Discovery:
    index: int
    value: int
    level: int


@dataclass(frozen=True, slots=True)
class Exploration:
    seed: int
    termination: Termination
    discoveries: Tuple[Discovery, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.discoveries)

    def to_dict(self) -> dict:
        return {
            "seed": str(self.seed),
            "termination": self.termination.value,
            "discoveries": [
                {"index": d.index, "value": str(d.value), "level": d.level}
                for d in self.discoveries
            ],
        }


class Explorer:
    """Breadth-first walk through the prime catacombs of a seed.

    Only prime neighbors are followed. Each newly discovered prime is
    recorded once, with the level at which it was first reached. The walk
    stops when the frontier empties or when `max_expansions` discoveries
    have been made; the budget is checked before each prime candidate, so
    a level may be cut off part way through.
    """

    def __init__(
        self,
        base: int = DEFAULT_BASE,
        hamming_distance: int = DEFAULT_HAMMING_DISTANCE,
        max_expansions: int = DEFAULT_MAX_EXPANSIONS,
        rng: Optional[random.Random] = None,
    ):
        self.base = validate_base(base)
        self.hamming_distance = validate_hamming_distance(hamming_distance)
        if max_expansions < 0:
            raise ValueError(f"Maximum expansions must be non-negative (given {max_expansions})")
        self.max_expansions = max_expansions
        self.rng = rng

    def explore(
        self,
        seed: int = DEFAULT_SEED,
        state_queue: Optional[SnapshotChannel[ExplorerSnapshot]] = None,
    ) -> Exploration:
        if seed < 0:
            raise ValueError(f"Seed must be non-negative (given {seed})")

        visited: Set[int] = set()
        frontier: Deque[Tuple[int, int]] = deque([(seed, 0)])
        discoveries: List[Discovery] = []
        expansions = 0
        state_version = 0

        def publish(current: int, level: int, complete: bool, termination: Optional[Termination] = None):
            nonlocal state_version
            if state_queue is None:
                return
            state_version += 1
            state_queue.publish(ExplorerSnapshot(
                state_version=state_version,
                complete=complete,
                seed=seed,
                base=self.base,
                hamming_distance=self.hamming_distance,
                max_expansions=self.max_expansions,
                current_value=current,
                current_level=level,
                expansions=expansions,
                frontier_size=len(frontier),
                visited_count=len(visited),
                termination=termination.value if termination else None,
                recent=tuple((d.index, d.value, d.level) for d in discoveries[-RECENT_DISCOVERIES:]),
            ))

        log.info(
            "exploration started",
            seed=seed,
            base=self.base,
            hamming_distance=self.hamming_distance,
            max_expansions=self.max_expansions,
        )

        current, level = seed, 0
        try:
            termination = Termination.EXHAUSTED
            while frontier and termination is Termination.EXHAUSTED:
                current, level = frontier.popleft()
                publish(current, level, complete=False)

                for catacomb in iter_catacombs(current, self.base, self.hamming_distance, self.rng):
                    if not catacomb.is_prime:
                        continue

                    if expansions >= self.max_expansions:
                        termination = Termination.BUDGET_EXCEEDED
                        break

                    number = catacomb.value
                    if number in visited:
                        continue

                    expansions += 1
                    discovery = Discovery(index=expansions, value=number, level=level + 1)
                    discoveries.append(discovery)
                    visited.add(number)
                    frontier.append((number, level + 1))
                    log.debug("discovery", index=discovery.index, value=number, level=discovery.level)
                    publish(current, level, complete=False)

            log.info(
                "exploration finished",
                seed=seed,
                termination=termination.value,
                discoveries=len(discoveries),
                frontier_size=len(frontier),
            )
            publish(current, level, complete=True, termination=termination)
            return Exploration(seed=seed, termination=termination, discoveries=tuple(discoveries))
        finally:
            # Always close the channel so the UI can exit.
            if state_queue is not None:
                state_queue.close()


def explore(
    seed: int = DEFAULT_SEED,
    base: int = DEFAULT_BASE,
    hamming_distance: int = DEFAULT_HAMMING_DISTANCE,
    max_expansions: int = DEFAULT_MAX_EXPANSIONS,
    rng: Optional[random.Random] = None,
) -> Exploration:
    """Run one breadth-first exploration from `seed`."""
    explorer = Explorer(base, hamming_distance, max_expansions, rng)
    return explorer.explore(seed)
