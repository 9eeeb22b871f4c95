from typing import Literal, Optional, TypeAlias

from rich.console import Group
from rich.live import Live
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table

from prime_catacombs.digits import format_digits, to_digits
from prime_catacombs.state_queue import SnapshotChannel
from prime_catacombs.state_snapshot import ExplorerSnapshot


COLORS = {
    "current": "bold yellow on black",
    "level": {
        "newest": "spring_green2",
        "older": "green",
    },
    "termination": {
        "exhausted": "turquoise2",
        "budget_exceeded": "bright_red",
    },
}

RowState: TypeAlias = Literal["newest", "older"]


def value_to_string(value: int, base: int, row_state: RowState) -> str:
    """Render a value in base 10 and in the walk's base, colored by age."""
    style = COLORS["level"][row_state]
    digits = format_digits(to_digits(value, base), base)
    return f"[{style}]{value}[/{style}]  [dim]({digits})[/dim]"


def render_status(state: ExplorerSnapshot) -> str:
    if not state.complete:
        return (
            f"Expanding [{COLORS['current']}]{state.current_value}[/{COLORS['current']}]"
            f" at level {state.current_level}"
        )
    if state.termination == "budget_exceeded":
        style = COLORS["termination"]["budget_exceeded"]
        return f"[{style}]Budget of {state.max_expansions} expansions reached.[/{style}]"
    style = COLORS["termination"]["exhausted"]
    return f"[{style}]No more numbers![/{style}]"


def render(state: Optional[ExplorerSnapshot]):
    """Render the explorer state snapshot."""
    if state is None:
        return Panel("Waiting for first update…", title="Prime Catacombs", border_style="dim")

    ui_table = Table(
        title=(
            f"Seed {state.seed}  |  base {state.base}  |  distance {state.hamming_distance}"
            f"  |  v{state.state_version}"
        )
    )
    ui_table.add_column("#", justify="right")
    ui_table.add_column("Prime")
    ui_table.add_column("Level", justify="right")

    newest_index = state.recent[-1][0] if state.recent else -1
    for index, value, level in state.recent:
        row_state: RowState = "newest" if index == newest_index else "older"
        ui_table.add_row(str(index), value_to_string(value, state.base, row_state), str(level))

    progress = ProgressBar(total=max(state.max_expansions, 1), completed=state.expansions, width=40)
    counters = (
        f"{state.expansions}/{state.max_expansions} discovered  |  "
        f"frontier {state.frontier_size}  |  visited {state.visited_count}"
    )
    return Panel(
        Group(ui_table, progress, counters, render_status(state)),
        title="Prime Catacombs",
        padding=(1, 1),
    )


def ui_loop(state_queue: SnapshotChannel[ExplorerSnapshot]) -> None:
    """Loop the UI until the channel closes."""
    with Live(render(None), refresh_per_second=30, screen=False) as live:
        for state in state_queue:
            live.update(render(state))
