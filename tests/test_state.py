import pytest

from fifteen.pqueue import PriorityQueue
from fifteen.state import FIELD_SIZE, Direction, Pos, State, goal_positions, state_less

SOLVED = list(range(1, 16)) + [0]


def test_goal_positions_place_blank_last():
    goal = goal_positions()
    assert len(goal) == FIELD_SIZE * FIELD_SIZE
    assert goal[0] == Pos(FIELD_SIZE - 1, FIELD_SIZE - 1)
    assert goal[1] == Pos(0, 0)


def test_goal_positions_match_solved_board():
    goal = goal_positions()
    for index, number in enumerate(SOLVED):
        assert goal[number] == Pos(index % FIELD_SIZE, index // FIELD_SIZE)


def test_solved_board_is_a_root_with_zero_heuristic():
    state = State.from_board(SOLVED)
    assert state.heuristic == 0
    assert state.moves == 0
    assert state.parent is None
    assert state.zero == Pos(FIELD_SIZE - 1, FIELD_SIZE - 1)


def test_from_board_rejects_non_permutation():
    with pytest.raises(ValueError):
        State.from_board([1] * 16)
    with pytest.raises(ValueError):
        State.from_board(SOLVED[:-1])


def test_can_move_from_corner():
    state = State.from_board(SOLVED)
    assert state.can_move(Direction.UP)
    assert state.can_move(Direction.LEFT)
    assert not state.can_move(Direction.DOWN)
    assert not state.can_move(Direction.RIGHT)


def test_child_moves_blank_and_links_parent():
    root = State.from_board(SOLVED)
    child = root.child(Direction.UP)
    assert child.zero == Pos(root.zero.x, root.zero.y - 1)
    assert child.parent is root
    assert child.moves == root.moves + 1
    assert child.heuristic == 1
    assert child.tiles[root.zero.y][root.zero.x] == root.tiles[child.zero.y][child.zero.x]
    assert root.tiles == State.from_board(SOLVED).tiles


def test_child_in_blocked_direction_raises():
    root = State.from_board(SOLVED)
    with pytest.raises(ValueError):
        root.child(Direction.RIGHT)


def test_moves_count_depth_of_chain():
    state = State.from_board(SOLVED)
    path = [Direction.UP, Direction.LEFT, Direction.UP]
    for direction in path:
        state = state.child(direction)
    assert state.moves == len(path)


def test_reverse_move_returns_same_arrangement():
    root = State.from_board(SOLVED)
    back = root.child(Direction.LEFT).child(Direction.RIGHT)
    assert back.is_same(root)
    assert back.tiles == root.tiles
    assert not root.child(Direction.LEFT).is_same(root)


def test_calculate_heuristic_is_zero_only_when_solved():
    root = State.from_board(SOLVED)
    moved = root.child(Direction.UP).child(Direction.LEFT)
    assert moved.calculate_heuristic() == moved.heuristic
    assert moved.heuristic > 0
    assert root.calculate_heuristic() == 0


def test_state_less_prefers_lower_cost():
    root = State.from_board(SOLVED)
    child = root.child(Direction.UP)
    assert state_less(root, child)
    assert not state_less(child, root)
    assert not state_less(root, root)


def test_state_less_breaks_ties_by_heuristic():
    root = State.from_board(SOLVED)
    a = root.child(Direction.UP)
    b = root.child(Direction.LEFT)
    a.moves, a.heuristic = 3, 2
    b.moves, b.heuristic = 0, 4
    assert state_less(a, b)
    assert not state_less(b, a)


def test_check_unique_adds_new_state():
    root = State.from_board(SOLVED)
    existing = []
    queue = PriorityQueue(state_less)
    assert root.check_unique_and_add(existing, queue)
    assert existing == [root]
    assert queue.top() is root


def test_check_unique_rejects_costlier_duplicate():
    root = State.from_board(SOLVED)
    again = root.child(Direction.UP).child(Direction.DOWN)
    existing = [root]
    queue = PriorityQueue(state_less)
    assert not again.check_unique_and_add(existing, queue)
    assert existing == [root]
    assert len(queue) == 0


def test_check_unique_overwrites_costlier_known_state():
    root = State.from_board(SOLVED)
    known = root.child(Direction.UP).child(Direction.DOWN)
    cheaper = State.from_board(SOLVED)
    existing = [known]
    queue = PriorityQueue(state_less)
    assert cheaper.check_unique_and_add(existing, queue)
    assert existing == [known]
    assert known.moves == cheaper.moves
    assert known.parent is None
    assert queue.top() is cheaper