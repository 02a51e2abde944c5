#!/usr/bin/env python3
"""Merge puzzle auto-player.

Plays headless games against the engine and prints a summary.

Usage::

    python main.py                          # one game, cycling directions
    python main.py -g 20 --seed 7           # twenty reproducible games
    python main.py --strategy random --sandbox
"""

import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import rich.box
import typer
from rich.console import Console
from rich.table import Table

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tilemerge.engine.gameplay import GridEngine  # noqa: E402
from tilemerge.engine.gameplay.game import DEFAULT_SIZE, DEFAULT_TARGET  # noqa: E402
from tilemerge.engine.gamestate import GameState  # noqa: E402
from tilemerge.models.grid import Direction  # noqa: E402

console = Console()

_CYCLE = (Direction.LEFT, Direction.DOWN, Direction.RIGHT, Direction.UP)


class Strategy(StrEnum):
    cycle = "cycle"
    random = "random"


# -- play loop ----------------------------------------------------------------


def _directions(strategy: Strategy, rng: random.Random, turn: int) -> list[Direction]:
    """Return every direction, in the order *strategy* prefers this turn."""
    if strategy is Strategy.random:
        order = list(Direction)
        rng.shuffle(order)
        return order
    start = turn % len(_CYCLE)
    return list(_CYCLE[start:] + _CYCLE[:start])


def play_game(
    engine: GridEngine,
    strategy: Strategy,
    rng: random.Random,
    max_moves: int,
    sandbox: bool,
) -> GridEngine:
    """Auto-play *engine* until it is lost, won, stuck, or out of moves."""
    turn = 0
    while engine.moves < max_moves:
        if engine.state is GameState.WON:
            if not sandbox:
                break
            engine.resume_after_win()
        if engine.state is GameState.LOST:
            break
        if not any(engine.move(d) for d in _directions(strategy, rng, turn)):
            break
        turn += 1
    return engine


# -- rendering ----------------------------------------------------------------


def _render_board(engine: GridEngine) -> Table:
    """Return a Rich Table of the final grid."""
    width = len(str(max(engine.best_tile, 2)))
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(engine.size):
        table.add_column(width=width, justify="center")
    for row in engine.to_rows():
        table.add_row(
            *(f"[bold]{v}[/bold]" if v else "[dim]·[/dim]" for v in row)
        )
    return table


def _render_results(games: list[GridEngine]) -> Table:
    table = Table(title="Results", box=rich.box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Score", justify="right", style="yellow")
    table.add_column("Best tile", justify="right", style="cyan")
    table.add_column("Moves", justify="right")
    table.add_column("State")
    for i, game in enumerate(games, 1):
        table.add_row(
            str(i), str(game.score), str(game.best_tile),
            str(game.moves), game.state.value,
        )
    return table


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    games: int = typer.Option(
        1, "-g", "--games",
        min=1,
        help="Number of games to play.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for spawns and direction choice. Omit for a random run.",
    ),
    max_moves: int = typer.Option(
        10_000, "--max-moves",
        min=1,
        help="Stop a game after this many successful moves.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    target: int = typer.Option(
        DEFAULT_TARGET, "-t", "--target",
        help="Tile value that wins the game.",
    ),
    strategy: Strategy = typer.Option(
        Strategy.cycle, "--strategy",
        help="How the auto-player picks directions.",
    ),
    sandbox: bool = typer.Option(
        False, "--sandbox",
        help="Keep playing after a win.",
    ),
) -> None:
    """Auto-play merge puzzle games and summarise the outcome."""
    rng = random.Random(seed)
    results: list[GridEngine] = []
    for _ in range(games):
        try:
            engine = GridEngine(size=size, target=target, rng=rng)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--target") from exc
        results.append(play_game(engine, strategy, rng, max_moves, sandbox))

    console.print(_render_results(results))
    console.print(_render_board(results[-1]))


if __name__ == "__main__":
    app()
