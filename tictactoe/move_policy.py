"""
cpu opponent: win, block, center, corner, side
"""
import logging
import random

from .game_logic import O, empty_cells, evaluate_board, other_mark

log = logging.getLogger(__name__)

CENTER = 4
CORNERS = (0, 2, 6, 8)
SIDES = (1, 3, 5, 7)


class InvalidPolicyInvocation(ValueError):
    """
    policy asked to move on a full or finished board
    """


def check_playable(board):
    if not empty_cells(board):
        raise InvalidPolicyInvocation("board is full")
    result, _ = evaluate_board(board)
    if result is not None:
        raise InvalidPolicyInvocation(f"game already decided: {result}")


def _completing_cell(board, mark, candidates):
    # first blank that would give mark a line, tried on a copy
    for i in candidates:
        trial = list(board)
        trial[i] = mark
        if evaluate_board(trial)[0] == mark:
            return i
    return None


def select_move(board, rng=None, mark=O):
    """
    pick a cell index for mark, or None when there is nothing to play
    rng only needs a choice(seq) method; the board is never modified
    """
    try:
        check_playable(board)
    except InvalidPolicyInvocation as e:
        log.debug("no cpu move: %s", e)
        return None

    rng = rng or random.Random()
    empty = empty_cells(board)

    idx = _completing_cell(board, mark, empty)          # 1) win
    if idx is None:
        idx = _completing_cell(board, other_mark(mark), empty)  # 2) block
    if idx is not None:
        return idx
    if board[CENTER] is None:                           # 3) center
        return CENTER
    for group in (CORNERS, SIDES):                      # 4) corners, 5) sides
        free = [i for i in group if board[i] is None]
        if free:
            return rng.choice(free)
    return None
