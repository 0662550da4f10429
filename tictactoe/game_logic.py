import logging

log = logging.getLogger(__name__)

X, O = 'X', 'O'
DRAW = 'draw'
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, cols, diags; scan order matters for evaluate_board
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

DEFAULT_NAMES = {X: "Player X", O: "Player O"}
CPU_NAME = "CPU"


class InvalidMove(ValueError):
    """
    move refused: cell taken, game over, bad index, or input locked
    """


def other_mark(mark):
    return O if mark == X else X


def empty_cells(board):
    """
    indices of blank cells, ascending
    """
    return [i for i, v in enumerate(board) if v is None]


def resolve_player_names(name_x="", name_o="", vs_cpu=False):
    """
    display names keyed by mark; blanks fall back to defaults, cpu owns O
    """
    players = {X: (name_x or "").strip() or DEFAULT_NAMES[X]}
    if vs_cpu:
        players[O] = CPU_NAME
    else:
        players[O] = (name_o or "").strip() or DEFAULT_NAMES[O]
    return players


class GameConfig:
    """
    settings carried from one game to the next
    """
    def __init__(self, vs_cpu=False, name_x="", name_o=""):
        self.vs_cpu = vs_cpu
        self.name_x = name_x; self.name_o = name_o

    def players(self):
        return resolve_player_names(self.name_x, self.name_o, self.vs_cpu)


class GameState:
    """
    one live game: board, turn, result and the ui-facing flags
    """
    def __init__(self, vs_cpu=False, players=None):
        self.board = [None] * CELL_COUNT  # row-major, None = empty
        self.current = X                  # X always starts
        self.winner = None                # 'X', 'O', 'draw' or None
        self.win_line = None              # set only on a line win
        self.vs_cpu = vs_cpu
        self.locked = False               # cpu move pending
        self.players = dict(players or DEFAULT_NAMES)

    @property
    def game_over(self):
        return self.winner is not None

    def __repr__(self):
        cells = ''.join(v or '.' for v in self.board)
        return (f"GameState(board={cells!r}, current={self.current!r}, "
                f"winner={self.winner!r}, locked={self.locked})")


def evaluate_board(board):
    """
    returns (result, win_line): (mark, line) on a win, ('draw', None) on a
    full board, else (None, None)
    """
    found = None
    for line in WIN_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            if found is None:
                found = (board[a], line)
            else:
                # both marks complete a line: not reachable by legal play
                assert found[0] == board[a], f"two winners on board {board!r}"
    if found is not None:
        return found
    if all(v is not None for v in board):
        return DRAW, None
    return None, None


def apply_move(state, index):
    """
    place the current mark at index, settle the result, pass the turn
    raises InvalidMove and leaves the state untouched if the move is refused
    """
    if state.locked:
        raise InvalidMove("input locked while cpu move is pending")
    if state.winner is not None:
        raise InvalidMove("game is already over")
    if not (0 <= index < CELL_COUNT):
        raise InvalidMove(f"cell {index} out of range")
    if state.board[index] is not None:
        raise InvalidMove(f"cell {index} already taken by {state.board[index]}")

    mark = state.current
    state.board[index] = mark
    state.winner, state.win_line = evaluate_board(state.board)
    log.debug("%s -> %d, result=%s", mark, index, state.winner)
    # turn only passes while the game is running
    if state.winner is None:
        state.current = other_mark(mark)
    return state


def reset_game(config=None):
    """
    fresh state with the carried-over settings
    """
    config = config or GameConfig()
    return GameState(vs_cpu=config.vs_cpu, players=config.players())
