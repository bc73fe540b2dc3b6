"""Rich terminal frontend — styled board, status line and key help.

The loop polls the keyboard with a short timeout so that solver replies
and animation frames are picked up between keypresses.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import Settings
from backend.engine.gameplay import GameSession
from backend.engine.gamestate import Phase
from backend.models.board import Board, Direction
from frontend.cli.input_handler import cell_of, get_key_timeout

console = Console()

_POLL = 0.05  # seconds between pumps while no key is pressed

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

_PHASE_TEXT = {
    Phase.IDLE: "[dim]Slide a tile: arrows / WASD, or press its cell number 1-9.[/dim]",
    Phase.SHUFFLING: "[yellow]Shuffling…[/yellow]",
    Phase.SOLVING: "[cyan]Solving…[/cyan]",
    Phase.ANIMATING: "[cyan]Solving…[/cyan]",
    Phase.SOLVED: "[bold green]★ Congratulations! ★[/bold green]",
}


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, solved: bool) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bold green" if solved else "bright_blue",
        padding=(0, 1),
    )
    for _ in range(3):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif solved or board.is_tile_correct(r * 3 + c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _controls(session: GameSession) -> Text:
    game = session.game
    controls = Text()
    controls.append("  N", style="bold cyan")
    controls.append("  new game   ", style="dim")
    solve_style = "bold cyan" if game.can_solve else "dim"
    controls.append("V", style=solve_style)
    controls.append("  solve   ", style="dim")
    if game.is_busy:
        controls.append("X", style="bold yellow")
        controls.append("  cancel   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


def _draw(session: GameSession, status: str = "") -> None:
    console.clear()
    game = session.game

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")

    parts = [
        Align.center(_render_board(game.board, game.is_won)),
        Text(""),
        Align.center(stats),
        Align.center(Text.from_markup(_PHASE_TEXT[game.phase_name])),
    ]
    if status:
        parts.append(Align.center(Text.from_markup(status)))

    panel = Panel(
        Group(*parts),
        title="[bold cyan]8-Puzzle[/bold cyan]",
        border_style="bold green" if game.is_won else "bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_controls(session)))


# -- game loop ----------------------------------------------------------------


def _handle(session: GameSession, key: str) -> str:
    """Apply one key to the session.  Returns a status message."""
    if key in _DIRECTIONS:
        session.move(_DIRECTIONS[key])
    elif (cell := cell_of(key)) is not None:
        session.move_tile(cell)
    elif key == "new":
        session.new_game()
    elif key == "solve":
        if not session.solve() and session.game.is_solved:
            return "[green]Already solved![/green]"
    elif key == "cancel":
        if session.cancel():
            return "[yellow]Stopped.[/yellow]"
    return ""


def _play(session: GameSession) -> None:
    status = ""
    _draw(session)
    while True:
        key = get_key_timeout(_POLL)
        if key == "quit":
            return

        redraw = session.pump()
        if key is not None:
            status = _handle(session, key)
            redraw = True

        notice = session.game.pop_notice()
        if notice:
            status = f"[red]{notice}[/red]"
            redraw = True

        if redraw:
            _draw(session, status)


# -- public entry point -------------------------------------------------------


def run(settings: Settings) -> None:
    """Launch the Rich CLI."""
    with settings.make_session() as session:
        _play(session)
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
