"""Board model for the 8-puzzle.

The board is a flat, row-major 9-tuple.  Position ``i`` lives at row
``i // 3``, column ``i % 3``; the value ``0`` is the empty cell.  Boards
are immutable: every move returns a new ``Board``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

SIZE = 3
CELLS = SIZE * SIZE
GOAL: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 0)


class IllegalMoveError(ValueError):
    """Raised when a move does not swap the blank with an orthogonal neighbour."""


class Direction(StrEnum):
    """Direction the *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides into it.
# UP   → tile below the blank moves up
# DOWN → tile above the blank moves down
# LEFT → tile right of the blank moves left
# RIGHT→ tile left of the blank moves right
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


# -- position helpers ----------------------------------------------------------


def _in_range(pos: int) -> bool:
    return 0 <= pos < CELLS


def row_col(pos: int) -> tuple[int, int]:
    return divmod(pos, SIZE)


def is_adjacent(pos_a: int, pos_b: int) -> bool:
    """Return True if the two cells share an edge.

    Uses the row/column decomposition: flat index difference alone
    would accept row-wrap pairs such as (2, 3).
    """
    if not (_in_range(pos_a) and _in_range(pos_b)):
        return False
    ra, ca = row_col(pos_a)
    rb, cb = row_col(pos_b)
    return abs(ra - rb) + abs(ca - cb) == 1


def neighbors(pos: int) -> list[int]:
    """Positions adjacent to *pos* in up, down, left, right order."""
    r, c = row_col(pos)
    out: list[int] = []
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        nr, nc = r + dr, c + dc
        if 0 <= nr < SIZE and 0 <= nc < SIZE:
            out.append(nr * SIZE + nc)
    return out


# -- board --------------------------------------------------------------------


@dataclass(frozen=True)
class Board:
    """An 8-puzzle position.  ``tiles`` is always a permutation of 0..8."""

    tiles: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.tiles) != CELLS:
            raise ValueError(
                f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(self.tiles)}."
            )
        if sorted(self.tiles) != list(range(CELLS)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{CELLS - 1}, got {list(self.tiles)}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: list[int] | tuple[int, ...]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(tuple(int(v) for v in flat))

    @classmethod
    def goal(cls) -> Board:
        return cls(GOAL)

    # -- queries --------------------------------------------------------------

    @property
    def blank_pos(self) -> int:
        return self.tiles.index(0)

    def rows(self) -> list[tuple[int, ...]]:
        return [self.tiles[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]

    def to_list(self) -> list[int]:
        return list(self.tiles)

    def is_solved(self) -> bool:
        return self.tiles == GOAL

    def is_tile_correct(self, pos: int) -> bool:
        """Check if the tile at *pos* sits on its goal cell."""
        return self.tiles[pos] == GOAL[pos]

    def inversions(self) -> int:
        values = [v for v in self.tiles if v != 0]
        return sum(
            1
            for i in range(len(values))
            for j in range(i + 1, len(values))
            if values[i] > values[j]
        )

    def is_solvable(self) -> bool:
        """Odd-width grid: solvable iff the inversion count is even (as at goal)."""
        return self.inversions() % 2 == 0

    def target_for(self, direction: Direction) -> int | None:
        """Return the tile position that would slide in *direction*, if any."""
        br, bc = row_col(self.blank_pos)
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < SIZE and 0 <= tc < SIZE):
            return None
        return tr * SIZE + tc

    # -- transformation -------------------------------------------------------

    def swap(self, empty_pos: int, target_pos: int) -> Board:
        """Return a new board with the blank and *target_pos* exchanged."""
        if not is_adjacent(empty_pos, target_pos):
            raise IllegalMoveError(
                f"Cells {empty_pos} and {target_pos} are not adjacent."
            )
        if self.tiles[empty_pos] != 0:
            raise IllegalMoveError(f"Cell {empty_pos} is not the blank.")
        tiles = list(self.tiles)
        tiles[empty_pos], tiles[target_pos] = tiles[target_pos], tiles[empty_pos]
        return Board(tuple(tiles))


def apply_move(board: Board, empty_pos: int, target_pos: int) -> Board:
    return board.swap(empty_pos, target_pos)


def is_goal(board: Board) -> bool:
    return board.is_solved()


def differs_by_one_move(before: Board, after: Board) -> bool:
    """True if *after* is reachable from *before* by exactly one legal move."""
    changed = [i for i in range(CELLS) if before.tiles[i] != after.tiles[i]]
    if len(changed) != 2:
        return False
    a, b = changed
    return 0 in (before.tiles[a], before.tiles[b]) and is_adjacent(a, b)
