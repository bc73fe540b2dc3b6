"""Solver gateway tests.  HTTP is faked by patching ``requests.post``."""

from __future__ import annotations

import pytest
import requests

from backend.engine.gamesolver import (
    HttpSolverGateway,
    LocalSolverGateway,
    SolverError,
    SolverGateway,
    validate_path,
)
from backend.engine.gamesolver.gateway import parse_snapshot
from backend.models.board import GOAL, Board

from tests.conftest import ONE_AWAY, TWO_AWAY

URL = "http://solver.test/solve"


class _FakeResponse:
    def __init__(self, status: int = 200, payload=None, bad_json: bool = False) -> None:
        self.status_code = status
        self.ok = 200 <= status < 300
        self.reason = "OK" if self.ok else "Internal Server Error"
        self._payload = payload
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value")
        return self._payload


@pytest.fixture
def post(monkeypatch: pytest.MonkeyPatch):
    """Patch ``requests.post``; set ``post.response`` or ``post.error``."""

    class _Post:
        response: _FakeResponse | None = None
        error: Exception | None = None
        calls: list[dict] = []

        def __call__(self, url, json=None, timeout=None):
            self.calls.append({"url": url, "json": json, "timeout": timeout})
            if self.error is not None:
                raise self.error
            return self.response

    fake = _Post()
    fake.calls = []
    monkeypatch.setattr(requests, "post", fake)
    return fake


# -- HTTP gateway -------------------------------------------------------------


def test_posts_board_and_parses_solution(post) -> None:
    post.response = _FakeResponse(
        payload={"solution": [TWO_AWAY.to_list(), ONE_AWAY.to_list(), list(GOAL)]}
    )
    path = HttpSolverGateway(URL, timeout=3.0).solve(TWO_AWAY)

    assert path == [TWO_AWAY, ONE_AWAY, Board.goal()]
    assert post.calls == [{"url": URL, "json": {"state": TWO_AWAY.to_list()}, "timeout": 3.0}]


def test_path_starting_at_successor_gets_request_board_prepended(post) -> None:
    post.response = _FakeResponse(payload={"solution": [ONE_AWAY.to_list(), list(GOAL)]})
    path = HttpSolverGateway(URL).solve(TWO_AWAY)
    assert path == [TWO_AWAY, ONE_AWAY, Board.goal()]


def test_transport_error(post) -> None:
    post.error = requests.ConnectionError("refused")
    with pytest.raises(SolverError, match="Could not reach"):
        HttpSolverGateway(URL).solve(TWO_AWAY)


def test_http_error_status(post) -> None:
    post.response = _FakeResponse(status=500)
    with pytest.raises(SolverError, match="500"):
        HttpSolverGateway(URL).solve(TWO_AWAY)


def test_invalid_json(post) -> None:
    post.response = _FakeResponse(bad_json=True)
    with pytest.raises(SolverError, match="invalid JSON"):
        HttpSolverGateway(URL).solve(TWO_AWAY)


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"solution": None},
        {"solution": "nope"},
        [1, 2, 3],
        {"solution": [[1, 2, 3]]},
        {"solution": [[1, 1, 3, 4, 5, 6, 7, 8, 0]]},
        {"solution": [5]},
        # floats that int() would truncate into a valid permutation
        {"solution": [[1, 2, 3, 4, 5, 6, 7, 0.9, 8], [1, 2, 3, 4, 5, 6, 7, 8, 0.4]]},
        # digit strings
        {"solution": ["123456708", "123456780"]},
        {"solution": [["1", "2", "3", "4", "5", "6", "7", "0", "8"], list(GOAL)]},
        # false standing in for the blank
        {"solution": [[1, 2, 3, 4, 5, 6, 7, False, 8], [1, 2, 3, 4, 5, 6, 7, 8, False]]},
        {"solution": [[True, 2, 3, 4, 5, 6, 7, 0, 8], list(GOAL)]},
        {"solution": [ONE_AWAY.to_list(), [*GOAL, 9]]},
    ],
)
def test_malformed_payloads(post, payload) -> None:
    post.response = _FakeResponse(payload=payload)
    with pytest.raises(SolverError):
        HttpSolverGateway(URL).solve(ONE_AWAY)


@pytest.mark.parametrize(
    "raw",
    [
        (1, 2, 3, 4, 5, 6, 7, 0, 8),
        [1, 2, 3, 4, 5, 6, 7, 0, 8.0],
        [1, 2, 3, 4, 5, 6, 7, None, 8],
        [1, 2, 3, 4, 5, 6, 7, 0],
    ],
)
def test_parse_snapshot_rejects_non_integer_lists(raw) -> None:
    with pytest.raises(SolverError):
        parse_snapshot(raw)


def test_parse_snapshot_accepts_plain_ints() -> None:
    assert parse_snapshot(ONE_AWAY.to_list()) == ONE_AWAY


def test_gateway_base_is_abstract() -> None:
    with pytest.raises(TypeError):
        SolverGateway()  # type: ignore[abstract]


def test_empty_solution(post) -> None:
    post.response = _FakeResponse(payload={"solution": []})
    with pytest.raises(SolverError, match="empty"):
        HttpSolverGateway(URL).solve(TWO_AWAY)


def test_path_must_end_at_goal(post) -> None:
    post.response = _FakeResponse(payload={"solution": [TWO_AWAY.to_list(), ONE_AWAY.to_list()]})
    with pytest.raises(SolverError, match="goal"):
        HttpSolverGateway(URL).solve(TWO_AWAY)


def test_path_must_start_near_request_board(post) -> None:
    post.response = _FakeResponse(payload={"solution": [list(GOAL)]})
    far = Board.from_flat([1, 2, 3, 4, 0, 6, 7, 5, 8])
    with pytest.raises(SolverError, match="start"):
        HttpSolverGateway(URL).solve(far)


def test_strict_mode_checks_every_step(post) -> None:
    jump = Board.from_flat([1, 2, 3, 4, 5, 0, 7, 8, 6])
    post.response = _FakeResponse(
        payload={"solution": [TWO_AWAY.to_list(), jump.to_list(), list(GOAL)]}
    )
    # lenient: shape is fine
    assert len(HttpSolverGateway(URL).solve(TWO_AWAY)) == 3
    with pytest.raises(SolverError, match="step 1"):
        HttpSolverGateway(URL, strict=True).solve(TWO_AWAY)


# -- local gateway ------------------------------------------------------------


def test_local_gateway_solves() -> None:
    path = LocalSolverGateway(strict=True).solve(TWO_AWAY)
    assert path == [TWO_AWAY, ONE_AWAY, Board.goal()]


def test_local_gateway_unsolvable() -> None:
    with pytest.raises(SolverError, match="unsolvable"):
        LocalSolverGateway().solve(Board.from_flat([2, 1, 3, 4, 5, 6, 7, 8, 0]))


def test_validate_path_accepts_single_board() -> None:
    validate_path([Board.goal()])
