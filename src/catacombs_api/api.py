import logging
from typing import Optional

from fastapi import FastAPI, APIRouter, HTTPException, Query
import structlog

from prime_catacombs.explorer import (
    DEFAULT_BASE,
    DEFAULT_HAMMING_DISTANCE,
    DEFAULT_MAX_EXPANSIONS,
    DEFAULT_SEED,
)
from prime_catacombs.queries import query_catacombs, query_exploration
from prime_catacombs.utils import CatacombsError, configure_logging, raise_int_digit_limit

from . import models

# Per-request work limits. A single generation step cannot be interrupted
# by the expansion budget, so its size is bounded up front.
MAX_API_EXPANSIONS = 100_000
MAX_API_DIGITS = 200
MAX_API_HAMMING_DISTANCE = 8
MAX_API_NEIGHBORS = 20_000


def configure_api_logging() -> None:
    """JSON log lines on stdout; per-discovery debug events are filtered out."""
    configure_logging(logging.INFO, json_output=True)


configure_api_logging()
raise_int_digit_limit()

log = structlog.get_logger()

# Create the FastAPI app
app = FastAPI(title="Prime Catacombs API")

# Create the router for API endpoints
router = APIRouter()


@router.get("/catacombs", response_model=models.CatacombsResponse)
def catacombs(
    number: str = Query(..., max_length=MAX_API_DIGITS),
    base: int = DEFAULT_BASE,
    hamming_distance: int = Query(DEFAULT_HAMMING_DISTANCE, le=MAX_API_HAMMING_DISTANCE),
    primes_only: bool = False,
):
    """ Compute all catacombs of a number expressed in base-10.
    With `primes_only`, only the prime neighbors (the open doors) are returned.
    """
    try:
        result = query_catacombs(
            number,
            base,
            hamming_distance,
            primes_only=primes_only,
            max_neighbors=MAX_API_NEIGHBORS,
        )
    except CatacombsError as e:
        log.warning("invalid catacombs request", number=number, base=base, detail=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    log.info(
        "catacombs computed",
        number=number,
        base=base,
        hamming_distance=hamming_distance,
        count=len(result.catacombs),
        dead_end=result.dead_end,
    )
    return models.CatacombsResponse.from_result(result)


@router.get("/explore", response_model=models.ExploreResponse)
def explore(
    seed: str = Query(str(DEFAULT_SEED), max_length=MAX_API_DIGITS),
    base: int = DEFAULT_BASE,
    hamming_distance: int = Query(DEFAULT_HAMMING_DISTANCE, le=MAX_API_HAMMING_DISTANCE),
    max_expansions: int = Query(DEFAULT_MAX_EXPANSIONS, ge=0, le=MAX_API_EXPANSIONS),
    random_seed: Optional[int] = None,
):
    """ Walk the prime catacombs breadth-first from `seed`.
    `termination` tells whether the frontier ran dry or the budget was spent.
    """
    try:
        exploration = query_exploration(
            seed,
            base,
            hamming_distance,
            max_expansions,
            random_seed=random_seed,
            max_neighbors=MAX_API_NEIGHBORS,
        )
    except CatacombsError as e:
        log.warning("invalid explore request", seed=seed, base=base, detail=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    log.info(
        "explored",
        seed=seed,
        base=base,
        hamming_distance=hamming_distance,
        termination=exploration.termination.value,
        discoveries=len(exploration),
    )
    return models.ExploreResponse.from_exploration(exploration)


# Include the router in the app (after all routes are defined)
app.include_router(router, prefix="/api")
