import logging
import re
import sys
from typing import Literal, Optional, TextIO, TypeAlias, Union

import structlog

OutputFormat: TypeAlias = Union[Literal["text", "json"], str]

NUMBER_PATTERN = re.compile(r"\+?[0-9]+")


class CatacombsError(Exception):
    pass


class InvalidNumberError(CatacombsError, ValueError):
    pass


class InvalidBaseError(CatacombsError, ValueError):
    pass


class InvalidHammingDistanceError(CatacombsError, ValueError):
    pass


class DigitRangeError(CatacombsError, ValueError):
    pass


class NeighborhoodTooLargeError(CatacombsError, ValueError):
    pass


def configure_logging(
    level: int = logging.WARNING,
    *,
    json_output: bool = False,
    file: Optional[TextIO] = None,
) -> None:
    """Configure structlog once per process.

    The CLI logs human-readable lines to stderr; the API logs JSON lines.
    `file=None` resolves to the current stdout on every call.
    """
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso" if json_output else "%H:%M:%S"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=file),
        cache_logger_on_first_use=False,
    )


def raise_int_digit_limit() -> None:
    """Lift the int <-> str conversion limit so huge catacombs can be printed."""
    sys.set_int_max_str_digits(0)


def parse_number(text: str) -> int:
    """Parse a non-negative base-10 integer, rejecting anything else."""
    if not isinstance(text, str):
        raise InvalidNumberError(f"Expected base-10 text, got {type(text).__name__}")

    stripped = text.strip()
    if not NUMBER_PATTERN.fullmatch(stripped):
        raise InvalidNumberError(f"Invalid base-10 number: {text!r}")
    try:
        return int(stripped, 10)
    except ValueError as e:
        # int/str digit limit; see raise_int_digit_limit()
        raise InvalidNumberError(
            f"Number has too many digits to parse ({len(stripped)})"
        ) from e


def validate_hamming_distance(hamming_distance: int) -> int:
    if hamming_distance < 1:
        raise InvalidHammingDistanceError(
            f"Hamming distance must be positive (given {hamming_distance})"
        )
    return hamming_distance
