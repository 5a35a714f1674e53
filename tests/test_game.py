import pytest

from watersort.box import Box
from watersort.game import DEFAULT_PUZZLE, Solver, main


def _units(box):
    return sorted(color for bottle in box for color in bottle)


def _one_pour_apart(before, after):
    for i in range(len(before)):
        for j in range(len(before)):
            if i == j:
                continue
            state = before.copy()
            if state.bottles[i].pour(state.bottles[j]) and state == after:
                return True
    return False


@pytest.fixture
def puzzle():
    return Box(DEFAULT_PUZZLE)


def test_bfs_solves_default_puzzle(puzzle):
    solver = Solver(puzzle)
    answer = solver.bfs()
    assert answer is not None
    assert answer.check() is True
    assert _units(answer) == _units(puzzle)
    assert solver.attempts > 0


def test_bfs_solution_path_is_a_chain_of_pours(puzzle):
    solver = Solver(puzzle)
    answer = solver.bfs()
    path = solver.solution_path(answer)
    assert path[-1] == answer
    states = [puzzle, *path]
    assert all(_one_pour_apart(a, b) for a, b in zip(states, states[1:]))


def test_bfs_does_not_touch_initial_box(puzzle):
    before = [list(b) for b in puzzle]
    Solver(puzzle).bfs()
    assert [list(b) for b in puzzle] == before


def test_bfs_unsolvable_returns_none():
    assert Solver(Box([[0, 1], [1, 0]])).bfs() is None


def test_bfs_on_sorted_box_finds_no_move():
    assert Solver(Box([[0, 0, 0, 0], []])).bfs() is None


def test_bfs_small_puzzle():
    box = Box([[0, 0, 0, 1], [1, 1, 1, 0], []])
    answer = Solver(box).bfs()
    assert answer is not None
    assert answer.check() is True
    assert _units(answer) == _units(box)


def test_dfs_solves_default_puzzle(puzzle):
    solver = Solver(puzzle)
    answer = solver.dfs(puzzle, 100)
    assert answer is not None
    assert answer.check() is True
    path = solver.solution_path(answer)
    states = [puzzle, *path]
    assert path[-1] == answer
    assert all(_one_pour_apart(a, b) for a, b in zip(states, states[1:]))


def test_dfs_negative_depth_returns_none(puzzle):
    assert Solver(puzzle).dfs(puzzle, -1) is None


def test_dfs_sorted_box_is_its_own_answer():
    box = Box([[2, 2, 2, 2], []])
    assert Solver(box).dfs(box, 0) == box


def test_dfs_depth_zero_on_unsorted_box(puzzle):
    assert Solver(puzzle).dfs(puzzle, 0) is None


def test_main_bfs_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Complete!!" in out
    assert "手数:" in out
    assert "解無し？" not in out


def test_main_dfs_output(capsys):
    assert main(["--dfs", "100"]) == 0
    out = capsys.readouterr().out
    assert "Complete!!" in out
    assert "経過時間:" in out


def test_main_dfs_too_shallow(capsys):
    assert main(["--dfs", "0"]) == 0
    assert "解無し？" in capsys.readouterr().out