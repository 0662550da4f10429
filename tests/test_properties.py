import random

from hypothesis import given, strategies as st

from tictactoe.game_logic import (
    DRAW, WIN_LINES, GameConfig, GameState, apply_move, empty_cells, evaluate_board,
    reset_game,
)
from tictactoe.move_policy import select_move

orders = st.permutations(list(range(9)))


def replay(order, n):
    # legal alternating play until n moves or the game ends
    state = GameState()
    for i in order[:n]:
        if state.winner is not None:
            break
        apply_move(state, i)
    return state


def line_owners(board):
    return {board[a] for a, b, c in WIN_LINES
            if board[a] is not None and board[a] == board[b] == board[c]}


@given(orders, st.integers(min_value=0, max_value=9))
def test_reachable_boards_have_one_outcome(order, n):
    state = replay(order, n)
    result, line = evaluate_board(state.board)
    owners = line_owners(state.board)
    assert len(owners) <= 1
    if owners:
        assert result in owners and line is not None
    elif not empty_cells(state.board):
        assert result == DRAW and line is None
    else:
        assert result is None and line is None


@given(orders, st.integers(min_value=0, max_value=8))
def test_move_changes_exactly_one_cell(order, n):
    state = replay(order, n)
    if state.winner is not None:
        return
    target = empty_cells(state.board)[0]
    before = list(state.board)
    mark = state.current
    apply_move(state, target)
    diff = [i for i in range(9) if before[i] != state.board[i]]
    assert diff == [target]
    assert state.board[target] == mark
    # turn passes only while the game is still running
    assert (state.current == mark) == (state.winner is not None)


@given(orders, st.integers(min_value=0, max_value=9), st.integers())
def test_policy_picks_an_empty_cell(order, n, seed):
    state = replay(order, n)
    board = list(state.board)
    idx = select_move(board, random.Random(seed), state.current)
    assert board == state.board
    if state.winner is None:
        assert idx is not None and board[idx] is None
    else:
        assert idx is None


@given(orders, st.integers(min_value=0, max_value=9), st.booleans())
def test_reset_is_always_fresh(order, n, vs_cpu):
    replay(order, n)
    state = reset_game(GameConfig(vs_cpu=vs_cpu))
    assert state.board == [None] * 9
    assert state.current == 'X'
    assert state.winner is None and not state.locked
