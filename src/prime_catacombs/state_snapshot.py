from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class ExplorerSnapshot:
    """Minimal immutable snapshot of explorer state."""

    state_version: int
    complete: bool
    seed: int
    base: int
    hamming_distance: int
    max_expansions: int

    current_value: int
    current_level: int
    expansions: int
    frontier_size: int
    visited_count: int
    termination: Optional[str] = None

    # (index, value, level) of the latest discoveries, oldest first
    recent: Tuple[Tuple[int, int, int], ...] = field(default_factory=tuple)

    @property
    def completion_percent(self) -> float:
        if self.max_expansions == 0:
            return 100.0
        return self.expansions / self.max_expansions * 100
