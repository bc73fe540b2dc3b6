"""In-process 8-puzzle solver (A* with the Manhattan heuristic)."""

from __future__ import annotations

import heapq
import itertools

from backend.models.board import GOAL, Board, neighbors, row_col

# Goal cell of each tile value.
_GOAL_POS: dict[int, int] = {v: i for i, v in enumerate(GOAL)}


def manhattan(tiles: tuple[int, ...]) -> int:
    """Sum of each tile's grid distance to its goal cell (blank excluded)."""
    cost = 0
    for idx, tile in enumerate(tiles):
        if tile == 0:
            continue
        r, c = row_col(idx)
        gr, gc = row_col(_GOAL_POS[tile])
        cost += abs(r - gr) + abs(c - gc)
    return cost


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board) -> list[Board]:
        """Return the shortest path of boards from *board* to the goal.

        The path starts with *board* itself.  Returns ``[]`` if the board
        is unsolvable.
        """
        if board.is_solved():
            return [board]

        if not Solver.is_solvable(board):
            return []

        start = board.tiles
        counter = itertools.count()
        frontier: list[tuple[int, int, int, tuple[int, ...]]] = [
            (manhattan(start), next(counter), 0, start)
        ]
        parent: dict[tuple[int, ...], tuple[int, ...] | None] = {start: None}
        depth: dict[tuple[int, ...], int] = {start: 0}

        while frontier:
            _, _, g, tiles = heapq.heappop(frontier)
            if tiles == GOAL:
                return Solver._unwind(parent, tiles)
            if g > depth[tiles]:
                continue
            blank = tiles.index(0)
            for pos in neighbors(blank):
                nxt = list(tiles)
                nxt[blank], nxt[pos] = nxt[pos], nxt[blank]
                key = tuple(nxt)
                if key in depth and depth[key] <= g + 1:
                    continue
                depth[key] = g + 1
                parent[key] = tiles
                heapq.heappush(frontier, (g + 1 + manhattan(key), next(counter), g + 1, key))

        return []

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return board.is_solvable()

    @staticmethod
    def _unwind(
        parent: dict[tuple[int, ...], tuple[int, ...] | None], tiles: tuple[int, ...]
    ) -> list[Board]:
        path: list[Board] = []
        node: tuple[int, ...] | None = tiles
        while node is not None:
            path.append(Board(node))
            node = parent[node]
        path.reverse()
        return path
