import random
from dataclasses import InitVar, dataclass, field
from typing import Optional

from prime_catacombs import primality


@dataclass(frozen=True, slots=True)
class CatacombNumber:
    """An integer reachable in the catacombs, tagged with its primality."""

    value: int
    is_prime: bool = field(init=False)
    rng: InitVar[Optional[random.Random]] = None

    def __post_init__(self, rng: Optional[random.Random]):
        if self.value < 0:
            raise ValueError(f"Catacomb numbers are non-negative (given {self.value})")
        object.__setattr__(self, "is_prime", primality.is_prime(self.value, rng))

    def to_dict(self) -> dict:
        """Big integers are carried as decimal text."""
        return {"value": str(self.value), "isPrime": self.is_prime}
