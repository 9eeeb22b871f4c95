from concurrent.futures import ThreadPoolExecutor
import json
import logging
import sys
from typing import Optional

import click

from prime_catacombs.digits import MAX_BASE, MIN_BASE
from prime_catacombs.explorer import (
    DEFAULT_BASE,
    DEFAULT_HAMMING_DISTANCE,
    DEFAULT_MAX_EXPANSIONS,
    DEFAULT_SEED,
    Exploration,
    Termination,
)
from prime_catacombs.queries import query_catacombs, query_exploration
from prime_catacombs.state_queue import SnapshotChannel
from prime_catacombs.state_snapshot import ExplorerSnapshot
from prime_catacombs.ui import ui_loop
from prime_catacombs.utils import (
    CatacombsError,
    OutputFormat,
    configure_logging,
    raise_int_digit_limit,
)

ENV_PREFIX = "CATACOMBS"

base_option = click.option(
    "--base", "-b",
    type=click.IntRange(MIN_BASE, MAX_BASE),
    default=DEFAULT_BASE,
    show_default=True,
    help="Numeric base the digits are perturbed in.",
)
hamming_option = click.option(
    "--hamming-distance", "-d",
    type=click.IntRange(min=1),
    default=DEFAULT_HAMMING_DISTANCE,
    show_default=True,
    help="Exact number of digits changed per neighbor.",
)
format_option = click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
)
random_seed_option = click.option(
    "--random-seed",
    type=int,
    default=None,
    help="Seed the Miller-Rabin witness source for reproducible runs.",
)


@click.group(context_settings={"auto_envvar_prefix": ENV_PREFIX})
@click.option("--verbose", "-v", is_flag=True, help="Log every discovery to stderr.")
def cli(verbose: bool):
    """Explore the prime number catacombs."""
    raise_int_digit_limit()
    # stderr, so results on stdout stay clean
    configure_logging(logging.DEBUG if verbose else logging.WARNING, file=sys.stderr)


@cli.command()
@click.argument("number")
@base_option
@hamming_option
@click.option("--primes-only", is_flag=True, help="Only list the prime neighbors.")
@format_option
@random_seed_option
def neighbors(
    number: str,
    base: int,
    hamming_distance: int,
    primes_only: bool,
    output_format: OutputFormat,
    random_seed: Optional[int],
):
    """List the catacomb numbers of NUMBER (base-10) and their primality."""
    try:
        result = query_catacombs(
            number, base, hamming_distance, primes_only=primes_only, random_seed=random_seed
        )
    except CatacombsError as e:
        raise click.BadParameter(str(e), param_hint="NUMBER")

    if output_format == "json":
        click.echo(json.dumps(result.to_list(), indent=2))
        return

    for catacomb in result.catacombs:
        click.echo(f"{catacomb.value}\t{'prime' if catacomb.is_prime else 'composite'}")
    if result.dead_end:
        click.echo("Dead end: no prime neighbors.")


def run_live(
    seed: str,
    base: int,
    hamming_distance: int,
    iterations: int,
    random_seed: Optional[int],
) -> Exploration:
    """Explore on a worker thread while the main thread renders progress."""
    state_queue: SnapshotChannel[ExplorerSnapshot] = SnapshotChannel()

    with ThreadPoolExecutor() as executor:
        future = executor.submit(
            query_exploration,
            seed,
            base,
            hamming_distance,
            iterations,
            random_seed=random_seed,
            state_queue=state_queue,
        )
        try:
            ui_loop(state_queue)
        except KeyboardInterrupt:
            # The next publish on the closed channel stops the worker.
            state_queue.close()
            raise click.Abort()

        return future.result()


def echo_exploration(exploration: Exploration, iterations: int) -> None:
    click.echo(f"Start: {exploration.seed} (Level 0)")
    for discovery in exploration.discoveries:
        click.echo(f"{discovery.index}: {discovery.value} (Level {discovery.level})")

    if exploration.termination is Termination.EXHAUSTED:
        click.echo("No more numbers!")
    else:
        click.echo(f"Budget of {iterations} expansions reached.")


@cli.command()
@click.option("--seed", "-s", default=str(DEFAULT_SEED), show_default=True, help="Starting number (base-10).")
@base_option
@hamming_option
@click.option(
    "--iterations", "-i",
    type=click.IntRange(min=0),
    default=DEFAULT_MAX_EXPANSIONS,
    show_default=True,
    help="Maximum number of discoveries.",
)
@format_option
@random_seed_option
@click.option("--live", is_flag=True, help="Render the walk as it happens.")
def explore(
    seed: str,
    base: int,
    hamming_distance: int,
    iterations: int,
    output_format: OutputFormat,
    random_seed: Optional[int],
    live: bool,
):
    """Walk the prime catacombs breadth-first from SEED."""
    try:
        if live:
            exploration = run_live(seed, base, hamming_distance, iterations, random_seed)
        else:
            exploration = query_exploration(
                seed, base, hamming_distance, iterations, random_seed=random_seed
            )
    except CatacombsError as e:
        raise click.BadParameter(str(e), param_hint="--seed")

    if output_format == "json":
        click.echo(json.dumps(exploration.to_dict(), indent=2))
    else:
        echo_exploration(exploration, iterations)


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind the server to")
@click.option("--port", default=8000, help="Port to bind the server to")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
def serve(host: str, port: int, reload: bool):
    """Start the catacombs HTTP API."""
    import uvicorn

    click.echo(f"Starting catacombs API on http://{host}:{port}")
    click.echo("Available endpoints:")
    click.echo("  - GET /api/catacombs - Neighbors of a number and their primality")
    click.echo("  - GET /api/explore   - Breadth-first walk through prime neighbors")
    click.echo("\nPress Ctrl+C to stop the server")

    if reload:
        # Use import string for reload mode
        uvicorn.run("catacombs_api.api:app", host=host, port=port, reload=True)
    else:
        from catacombs_api.api import app

        uvicorn.run(app, host=host, port=port, reload=False)


if __name__ == "__main__":
    cli()
