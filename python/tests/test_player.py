from __future__ import annotations

import pytest

from backend.engine.gameanimator import SolutionPlayer
from backend.models.board import Board

from tests.conftest import ONE_AWAY, TWO_AWAY

PATH = [TWO_AWAY, ONE_AWAY, Board.goal()]


def test_schedule_is_relative_to_start() -> None:
    player = SolutionPlayer(PATH, delay=0.5, started_at=20.0)
    assert [player.due_at(k) for k in range(3)] == [20.0, 20.5, 21.0]


def test_nothing_due_before_start() -> None:
    player = SolutionPlayer(PATH, delay=0.5, started_at=20.0)
    assert player.due(19.9) == 0


def test_steps_come_out_in_order_exactly_once() -> None:
    player = SolutionPlayer(PATH, delay=1.0, started_at=0.0)
    played: list[Board] = []
    for now in (0.0, 0.2, 1.0, 1.5, 2.0, 3.0, 9.0):
        for _ in range(player.due(now)):
            played.append(player.step())
    assert played == PATH
    assert player.finished
    assert player.due(100.0) == 0


def test_zero_delay_makes_everything_due() -> None:
    player = SolutionPlayer(PATH, delay=0.0, started_at=0.0)
    assert player.due(0.0) == 3


def test_step_past_end_raises() -> None:
    player = SolutionPlayer([Board.goal()])
    player.step()
    with pytest.raises(IndexError):
        player.step()


def test_rejects_empty_path() -> None:
    with pytest.raises(ValueError):
        SolutionPlayer([])


def test_rejects_negative_delay() -> None:
    with pytest.raises(ValueError):
        SolutionPlayer(PATH, delay=-1.0)


def test_len_and_remaining() -> None:
    player = SolutionPlayer(PATH)
    assert len(player) == 3
    player.step()
    assert player.remaining == 2


def test_accumulated_clock_still_hits_each_boundary() -> None:
    player = SolutionPlayer(PATH, delay=0.3, started_at=0.0)
    player.step()
    now = 0.0
    for _ in range(3):
        now += 0.1  # 0.30000000000000004
    assert player.due(now) == 1
    now = 0.1 + 0.2 + 0.1 + 0.2
    assert player.due(now) == 2
