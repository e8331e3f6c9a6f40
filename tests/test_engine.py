import math

import pytest

from gridpath.core.engine import ASTAR, DIJKSTRA, RunRequest, run, search, strategy_key, validate_endpoints
from gridpath.core.types import Grid, GridPathError, InvalidEndpoint, PATH


@pytest.mark.parametrize("strategy", [DIJKSTRA, ASTAR])
def test_run_found(strategy):
    resp = run(RunRequest(grid_size=3, blocked=frozenset({(1, 1)}),
                          start=(0, 0), end=(2, 2), strategy=strategy))
    assert resp.result.found
    assert resp.result.cost == pytest.approx(2 + math.sqrt(2))
    assert resp.trace == resp.result.trace
    assert [e.cell for e in resp.trace if e.tag == PATH] == resp.result.path[1:-1]


@pytest.mark.parametrize("strategy", [DIJKSTRA, ASTAR])
def test_run_not_found_is_a_result(strategy):
    resp = run(RunRequest(grid_size=4, blocked=frozenset({(2, 3), (2, 2), (3, 2)}),
                          start=(0, 0), end=(3, 3), strategy=strategy))
    assert resp.result.status == "no_path"
    assert resp.result.path is None


@pytest.mark.parametrize("name,expected", [
    ("dijkstra", DIJKSTRA), ("Dijkstra", DIJKSTRA),
    ("astar", ASTAR), ("A*", ASTAR), (" a-star ", ASTAR),
])
def test_strategy_names(name, expected):
    assert strategy_key(name) == expected


def test_unknown_strategy():
    with pytest.raises(ValueError):
        run(RunRequest(grid_size=3, start=(0, 0), end=(2, 2), strategy="bfs"))


@pytest.mark.parametrize("blocked,start,end", [
    ({(0, 0)}, (0, 0), (2, 2)),      # blocked start
    ({(2, 2)}, (0, 0), (2, 2)),      # blocked end
    (set(), (1, 1), (1, 1)),         # same cell
    (set(), (0, 0), (3, 0)),         # outside the grid
    (set(), (-1, 0), (2, 2)),
])
def test_invalid_endpoints(blocked, start, end):
    with pytest.raises(InvalidEndpoint):
        run(RunRequest(grid_size=3, blocked=frozenset(blocked), start=start, end=end))


def test_invalid_endpoint_is_a_value_error():
    grid = Grid.from_blocked(3, {(2, 2)})
    with pytest.raises(ValueError):
        validate_endpoints(grid, (0, 0), (2, 2))
    with pytest.raises(GridPathError):
        search(grid, (0, 0), (2, 2))


def test_search_sees_walls_added_between_runs():
    grid = Grid.empty(3)
    first = search(grid, (0, 0), (2, 2), ASTAR)
    grid.toggle((1, 1))
    second = search(grid, (0, 0), (2, 2), ASTAR)
    assert first.cost == pytest.approx(2 * math.sqrt(2))
    assert second.cost == pytest.approx(2 + math.sqrt(2))


def test_grid_helpers():
    grid = Grid.from_blocked(4, {(1, 2), (3, 0)})
    assert grid.blocked_cells() == {(1, 2), (3, 0)}
    assert grid.is_block((1, 2)) and not grid.is_block((2, 1))
    assert grid.toggle((1, 2)) is False
    grid.clear()
    assert grid.blocked_cells() == set()
    with pytest.raises(ValueError):
        grid.set_blocked((4, 0), True)
    with pytest.raises(ValueError):
        Grid.empty(0)
