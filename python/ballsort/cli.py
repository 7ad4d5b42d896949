"""Ball sort level tool.

Usage::

    ballsort generate 1 500 -o levels.json --seed 7   # batch export
    ballsort show 42                                  # print one level
    ballsort stats 1 20                               # level statistics
    ballsort config 1500                              # generation parameters
    ballsort solve 12                                 # run the solver
    ballsort progress                                 # saved player progress
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

import rich.box
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ballsort.engine.gamegenerator import (
    GameGenerator,
    LevelCache,
    config_for,
    validation_failures,
)
from ballsort.engine.gamesolver import Solver, board_stats
from ballsort.errors import BallSortError
from ballsort.models.board import TUBE_CAPACITY, Board
from ballsort.models.progress import ProgressManager

DATA_DIR = Path("data")

console = Console()
logger = logging.getLogger("ballsort")

app = typer.Typer(add_completion=False, help="Generate and inspect ball sort levels.")

_STYLES: dict[str, str] = {
    "red": "red",
    "blue": "blue",
    "green": "green",
    "yellow": "yellow",
    "purple": "purple",
    "orange": "orange1",
    "pink": "pink1",
    "cyan": "cyan",
    "lime": "chartreuse1",
    "indigo": "slate_blue3",
    "teal": "dark_cyan",
    "magenta": "magenta",
    "navy": "navy_blue",
    "maroon": "dark_red",
    "olive": "yellow4",
    "coral": "light_coral",
}


# -- helpers ------------------------------------------------------------------


def _rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed)


def _render_board(board: Board) -> Table:
    """Return a Rich Table with one column per tube, top row first."""
    table = Table(
        show_header=True,
        box=rich.box.ROUNDED,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for i in range(len(board)):
        table.add_column(str(i), justify="center")

    for depth in range(TUBE_CAPACITY - 1, -1, -1):
        cells: list[Text] = []
        for tube in board.tubes:
            if depth < len(tube):
                color = tube[depth]
                cells.append(Text("●", style=f"bold {_STYLES.get(color, 'white')}"))
            else:
                cells.append(Text("·", style="dim"))
        table.add_row(*cells)
    return table


def _load_cache(levels_file: Optional[Path], seed: Optional[int], strict: bool) -> LevelCache:
    if levels_file is not None:
        try:
            return LevelCache.load_json(levels_file, rng=_rng(seed))
        except BallSortError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            raise typer.Exit(code=1)
    return LevelCache(rng=_rng(seed), strict=strict)


# -- commands -----------------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log generation retries and fallbacks.",
    ),
) -> None:
    """Ball sort level tool."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@app.command()
def generate(
    start: int = typer.Argument(1, min=1, help="First level index."),
    count: int = typer.Argument(100, min=1, help="Number of levels."),
    out: Path = typer.Option(
        Path("levels.json"), "-o", "--out",
        help="JSON file to write.",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="RNG seed."),
    strict: bool = typer.Option(
        False, "--strict",
        help="Fail instead of falling back to an easier level.",
    ),
) -> None:
    """Generate a range of levels and export them as JSON."""
    cache = LevelCache(rng=_rng(seed), strict=strict)
    try:
        cache.pre_generate(start, count)
    except BallSortError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    cache.export_json(out)
    console.print(f"[green]Wrote {len(cache)} levels to {out}[/green]")


@app.command()
def show(
    level: int = typer.Argument(..., min=1, help="Level index."),
    seed: Optional[int] = typer.Option(None, "--seed", help="RNG seed."),
    levels_file: Optional[Path] = typer.Option(
        None, "-f", "--file",
        help="Read levels from an exported JSON file.",
    ),
) -> None:
    """Print one level.

    Freshly generated levels are also checked against the config they were
    built from.  A loaded file does not record its config, so no check is
    made for it.
    """
    if levels_file is not None:
        board = _load_cache(levels_file, seed, strict=False).get(level)
        console.print(_render_board(board))
        return

    # Same draw order as LevelCache.get, so a seed gives the same board.
    rng = _rng(seed)
    config = config_for(level, rng)
    board = GameGenerator.generate(config, rng)
    console.print(_render_board(board))
    failures = validation_failures(board, config)
    if failures:
        console.print(f"[yellow]Not valid: {'; '.join(failures)}[/yellow]")


@app.command()
def stats(
    start: int = typer.Argument(1, min=1, help="First level index."),
    count: int = typer.Argument(10, min=1, help="Number of levels."),
    seed: Optional[int] = typer.Option(None, "--seed", help="RNG seed."),
) -> None:
    """Show statistics for a range of generated levels."""
    cache = LevelCache(rng=_rng(seed))
    table = Table(title="Level statistics", box=rich.box.ROUNDED, border_style="dim")
    for name in ("Level", "Tubes", "Empty", "Full", "Units", "Colours", "Moves"):
        table.add_column(name, justify="right")

    for level in range(start, start + count):
        s = board_stats(cache.get(level))
        table.add_row(
            str(level), str(s.total_tubes), str(s.empty_tubes), str(s.full_tubes),
            str(s.total_units), str(s.colors), str(s.forward_moves),
        )
    console.print(table)


@app.command()
def config(
    level: int = typer.Argument(..., min=1, help="Level index."),
    seed: Optional[int] = typer.Option(None, "--seed", help="RNG seed."),
) -> None:
    """Show the generation parameters for a level."""
    cfg = config_for(level, _rng(seed))
    table = Table(box=rich.box.SIMPLE, show_header=False)
    table.add_column(style="dim")
    table.add_column(style="bold yellow", justify="right")
    for key, value in cfg.to_dict().items():
        table.add_row(key, str(value))
    console.print(table)


@app.command()
def solve(
    level: int = typer.Argument(..., min=1, help="Level index."),
    seed: Optional[int] = typer.Option(None, "--seed", help="RNG seed."),
    levels_file: Optional[Path] = typer.Option(
        None, "-f", "--file",
        help="Read levels from an exported JSON file.",
    ),
    max_states: int = typer.Option(
        50_000, "--max-states", min=1,
        help="Search budget in distinct positions.",
    ),
) -> None:
    """Search for a solution to a level."""
    board = _load_cache(levels_file, seed, strict=False).get(level)
    moves = Solver.solve(board, max_states)
    if moves is None:
        console.print("[yellow]No solution found within the search budget.[/yellow]")
        raise typer.Exit(code=1)
    console.print(f"[bold green]Solved in {len(moves)} moves[/bold green]")
    console.print(" ".join(f"{m.source}→{m.dest}" for m in moves))


@app.command()
def progress(
    data_dir: Path = typer.Option(DATA_DIR, "--data-dir", help="Progress directory."),
    reset: bool = typer.Option(False, "--reset", help="Clear saved progress."),
) -> None:
    """Show (or reset) saved player progress."""
    manager = ProgressManager(data_dir / "progress.json")
    if reset:
        manager.reset()
        console.print("[yellow]Progress reset.[/yellow]")
        return

    p = manager.progress
    console.print(f"  Current level: [bold yellow]{p.current_level}[/bold yellow]")
    console.print(f"  Completed:     [bold yellow]{len(p.completed_levels)}[/bold yellow]")
    console.print(f"  Total moves:   [bold yellow]{p.total_moves}[/bold yellow]")
    if p.best_moves:
        table = Table(title="Best", box=rich.box.ROUNDED, border_style="dim")
        table.add_column("Level", justify="right", style="dim")
        table.add_column("Moves", justify="right", style="yellow")
        for level, moves in sorted(p.best_moves.items()):
            table.add_row(str(level), str(moves))
        console.print(table)


if __name__ == "__main__":
    app()
