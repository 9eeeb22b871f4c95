from rich.console import Console
from rich.panel import Panel

from prime_catacombs.state_snapshot import ExplorerSnapshot
from prime_catacombs.ui import render, value_to_string


def make_snapshot(**overrides) -> ExplorerSnapshot:
    fields = dict(
        state_version=3,
        complete=False,
        seed=2,
        base=2,
        hamming_distance=1,
        max_expansions=10,
        current_value=3,
        current_level=1,
        expansions=2,
        frontier_size=2,
        visited_count=2,
        recent=((1, 3, 1), (2, 2, 2)),
    )
    fields.update(overrides)
    return ExplorerSnapshot(**fields)


def render_text(renderable) -> str:
    console = Console(width=120, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


class TestRender:
    """Test suite for the live exploration view"""

    def test_waiting(self):
        """Before the first snapshot a placeholder is shown"""
        assert isinstance(render(None), Panel)
        assert "Waiting for first update" in render_text(render(None))

    def test_in_progress(self):
        """Running walks show the value being expanded and the counters"""
        text = render_text(render(make_snapshot()))
        assert "Expanding 3 at level 1" in text
        assert "2/10 discovered" in text
        assert "(11)" in text

    def test_budget_exceeded(self):
        """Finished walks say why they stopped"""
        snapshot = make_snapshot(complete=True, termination="budget_exceeded", expansions=10)
        assert "Budget of 10 expansions reached." in render_text(render(snapshot))

    def test_exhausted(self):
        """Exhausted walks say so"""
        snapshot = make_snapshot(complete=True, termination="exhausted")
        assert "No more numbers!" in render_text(render(snapshot))

    def test_value_to_string(self):
        """Values show their digits in the walk's base"""
        assert "(1101)" in value_to_string(13, 2, "newest")

    def test_completion_percent(self):
        """Progress is relative to the budget"""
        assert make_snapshot().completion_percent == 20.0
        assert make_snapshot(max_expansions=0, expansions=0).completion_percent == 100.0
