from pydantic import BaseModel, ConfigDict, Field

from prime_catacombs.explorer import Exploration, Termination
from prime_catacombs.models.catacomb_number import CatacombNumber
from prime_catacombs.queries import CatacombsResult


class CatacombNumberModel(BaseModel):
    """Values travel as decimal strings so big integers survive JSON clients."""

    model_config = ConfigDict(populate_by_name=True)

    value: str
    is_prime: bool = Field(alias="isPrime")

    @classmethod
    def from_catacomb(cls, catacomb: CatacombNumber) -> "CatacombNumberModel":
        return cls(value=str(catacomb.value), is_prime=catacomb.is_prime)


class CatacombsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    value: str
    base: int
    hamming_distance: int
    dead_end: bool = Field(alias="deadEnd")
    catacombs: list[CatacombNumberModel]

    @classmethod
    def from_result(cls, result: CatacombsResult) -> "CatacombsResponse":
        return cls(
            value=str(result.value),
            base=result.base,
            hamming_distance=result.hamming_distance,
            dead_end=result.dead_end,
            catacombs=[CatacombNumberModel.from_catacomb(c) for c in result.catacombs],
        )


class DiscoveryModel(BaseModel):
    index: int
    value: str
    level: int


class ExploreResponse(BaseModel):
    seed: str
    termination: Termination
    discoveries: list[DiscoveryModel]

    @classmethod
    def from_exploration(cls, exploration: Exploration) -> "ExploreResponse":
        return cls(
            seed=str(exploration.seed),
            termination=exploration.termination,
            discoveries=[
                DiscoveryModel(index=d.index, value=str(d.value), level=d.level)
                for d in exploration.discoveries
            ],
        )
