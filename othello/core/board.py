"""Othello rules: positions, immutable game states, legal moves and flipping."""

from typing import List, NamedTuple, Optional, Sequence, Tuple

EMPTY = 0
BLACK = 1
WHITE = 2

MIN_SIZE = 4

_SYMBOLS = {EMPTY: ".", BLACK: "B", WHITE: "W"}
_CELLS = {v: k for k, v in _SYMBOLS.items()}

# (dcol, drow) for the eight neighbours
DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
]


class Position(NamedTuple):
    col: int
    row: int

    @property
    def is_pass(self) -> bool:
        return self == NO_MOVE


# "no move available": returned when the player to move has to pass
NO_MOVE = Position(-1, -1)


def opponent(player: int) -> int:
    return WHITE if player == BLACK else BLACK


def check_size(size: int) -> int:
    """Reject board sizes the rules can't be played on."""
    if size < MIN_SIZE or size % 2:
        raise ValueError(f"Board size must be an even number >= {MIN_SIZE}, got {size}")
    return size


class GameState:
    """Board plus player to move.

    States never change after construction: `apply_move` builds a new board,
    so a search can hand each branch its own state without copying by hand.
    `board[row][col]` holds EMPTY, BLACK or WHITE.
    """

    __slots__ = ("board", "player", "size")

    def __init__(self, board: Sequence[Sequence[int]], player: int = BLACK):
        size = check_size(len(board))
        if any(len(row) != size for row in board):
            raise ValueError("Board must be square")
        if player not in (BLACK, WHITE):
            raise ValueError(f"Invalid player: {player}")
        for row in board:
            for cell in row:
                if cell not in (EMPTY, BLACK, WHITE):
                    raise ValueError(f"Invalid cell value: {cell}")
        self.board: Tuple[Tuple[int, ...], ...] = tuple(tuple(row) for row in board)
        self.player = player
        self.size = size

    @classmethod
    def initial(cls, size: int = 8) -> "GameState":
        """Standard start: four tokens in the centre, black to move."""
        check_size(size)
        m = size // 2
        board = [[EMPTY] * size for _ in range(size)]
        board[m - 1][m - 1] = WHITE
        board[m][m] = WHITE
        board[m][m - 1] = BLACK
        board[m - 1][m] = BLACK
        return cls(board, BLACK)

    @classmethod
    def from_rows(cls, rows: Sequence[str], player: int = BLACK) -> "GameState":
        """Parse one string per row: '.' empty, 'B' black, 'W' white."""
        board = []
        for line in rows:
            try:
                board.append([_CELLS[ch] for ch in line.strip().upper()])
            except KeyError as e:
                raise ValueError(f"Unknown cell symbol {e.args[0]!r} in {line!r}") from None
        return cls(board, player)

    def to_rows(self) -> List[str]:
        return ["".join(_SYMBOLS[cell] for cell in row) for row in self.board]

    def __eq__(self, other):
        if not isinstance(other, GameState):
            return NotImplemented
        return self.player == other.player and self.board == other.board

    def __hash__(self):
        return hash((self.board, self.player))

    def __repr__(self):
        return f"GameState(player={self.player}, rows={self.to_rows()!r})"

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def cell(self, pos: Position) -> int:
        return self.board[pos.row][pos.col]

    def on_board(self, col: int, row: int) -> bool:
        return 0 <= col < self.size and 0 <= row < self.size

    def _flips(self, col: int, row: int, player: int) -> List[Position]:
        """Opponent tokens flipped if `player` places at (col, row)."""
        if self.board[row][col] != EMPTY:
            return []
        other = opponent(player)
        flipped = []
        for dc, dr in DIRECTIONS:
            run = []
            c, r = col + dc, row + dr
            while self.on_board(c, r) and self.board[r][c] == other:
                run.append(Position(c, r))
                c += dc
                r += dr
            if run and self.on_board(c, r) and self.board[r][c] == player:
                flipped.extend(run)
        return flipped

    def is_legal(self, move: Position, player: Optional[int] = None) -> bool:
        if not self.on_board(move.col, move.row):
            return False
        return bool(self._flips(move.col, move.row, player or self.player))

    def legal_moves(self, player: Optional[int] = None) -> List[Position]:
        """Legal moves in column-major order (column outer, row inner)."""
        player = player or self.player
        return [
            Position(c, r)
            for c in range(self.size)
            for r in range(self.size)
            if self._flips(c, r, player)
        ]

    def apply_move(self, move: Position) -> "GameState":
        """Return the state after `move`; NO_MOVE passes the turn."""
        if move == NO_MOVE:
            return GameState(self.board, opponent(self.player))
        if not self.on_board(move.col, move.row):
            raise ValueError(f"Move {tuple(move)} is off the board")
        flipped = self._flips(move.col, move.row, self.player)
        if not flipped:
            raise ValueError(f"Illegal move {tuple(move)} for player {self.player}")
        board = [list(row) for row in self.board]
        board[move.row][move.col] = self.player
        for pos in flipped:
            board[pos.row][pos.col] = self.player
        return GameState(board, opponent(self.player))

    def token_counts(self) -> Tuple[int, int]:
        """(black tokens, white tokens)"""
        black = white = 0
        for row in self.board:
            for cell in row:
                if cell == BLACK:
                    black += 1
                elif cell == WHITE:
                    white += 1
        return black, white

    def is_finished(self) -> bool:
        return not self.legal_moves(BLACK) and not self.legal_moves(WHITE)

    def winner(self) -> Optional[int]:
        """BLACK, WHITE, EMPTY for a draw, or None while the game is running."""
        if not self.is_finished():
            return None
        black, white = self.token_counts()
        if black > white:
            return BLACK
        if white > black:
            return WHITE
        return EMPTY
