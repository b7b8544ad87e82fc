"""
Game state management for noughts and crosses.
Tracks the n x n board and whose turn it is.
"""

from typing import Optional, List, Tuple, NamedTuple, Sequence
from dataclasses import dataclass, field

from .symbols import Symbol
from .move_validator import MoveValidator
from .win_checker import WinChecker


_validator = MoveValidator()
_win_checker = WinChecker()


class MoveResult(NamedTuple):
    """Outcome of an applied move."""
    is_done: bool
    winner: Symbol  # Symbol.EMPTY means draw (or game still running)


@dataclass
class Move:
    """
    A candidate move found by the search.
    """
    row: int        # Row (0 to size-1), -1 before any move is chosen
    col: int        # Column (0 to size-1), -1 before any move is chosen
    score: int      # Evaluator score from the searching player's view


@dataclass
class GameState:
    """
    The complete state of a noughts and crosses game.

    Tracks:
    - The n x n board (Symbol per cell)
    - The player allowed to move next

    Use GameState.create(size) to start a new game.
    """

    size: int

    # The n x n board, Symbol.EMPTY for unplayed cells
    board: List[List[Symbol]] = field(default_factory=list)

    # Current player's turn, CROSS always starts
    current_player: Symbol = Symbol.CROSS

    def __post_init__(self):
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ValueError(f"Board size must be an integer, got {self.size!r}")
        if self.size < 1:
            raise ValueError(f"Board size must be at least 1, got {self.size}")
        if not self.board:
            self.board = [[Symbol.EMPTY for _ in range(self.size)] for _ in range(self.size)]
        elif len(self.board) != self.size or any(len(row) != self.size for row in self.board):
            raise ValueError(f"Board must be {self.size}x{self.size}")
        if not self.current_player.is_player:
            raise ValueError(f"{self.current_player.name} cannot be the player to move")

    @classmethod
    def create(cls, size: int) -> "GameState":
        """
        Start a new game on an empty size x size board.

        Args:
            size: Board side length, at least 1.

        Raises:
            ValueError: If size is smaller than 1.
        """
        return cls(size=size)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        current_player: Optional[Symbol] = None
    ) -> "GameState":
        """
        Build a game from strings, one per row, e.g. ["XX ", " O ", "   "].

        Args:
            rows: Row strings using 'X', 'O' and ' ' / '.' / '-'.
            current_player: Player to move. Inferred from the symbol
                count when omitted (CROSS if both counts are equal).

        Raises:
            ValueError: On a non-square grid, an unknown character or a
                current_player that is not CROSS or NOUGHT.
        """
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Board rows must form a square grid")

        board = [[Symbol.from_char(char) for char in row] for row in rows]

        if current_player is None:
            crosses = sum(row.count(Symbol.CROSS) for row in board)
            noughts = sum(row.count(Symbol.NOUGHT) for row in board)
            current_player = Symbol.CROSS if crosses == noughts else Symbol.NOUGHT

        return cls(size=size, board=board, current_player=current_player)

    def snapshot(self) -> List[List[Symbol]]:
        """Get a copy of the board contents, safe to keep or modify."""
        return [list(row) for row in self.board]

    def apply_move(self, row: int, col: int, player: Symbol) -> MoveResult:
        """
        Mark a cell for the given player.

        Args:
            row: Row index (0 to size-1).
            col: Column index (0 to size-1).
            player: The player making the move.

        Returns:
            MoveResult(is_done, winner). winner is Symbol.EMPTY on a draw.

        Raises:
            WrongTurnError: player is not the current player.
            OutOfBoundsError: row or col is outside the board.
            CellOccupiedError: the cell is not empty.
        """
        _validator.validate_move(self, row, col, player).raise_for_error(row, col)

        self.board[row][col] = player

        is_done, winner = _win_checker.evaluate_terminal(self)

        self.current_player = player.opposite()

        return MoveResult(is_done, winner)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board, row by row.

        Returns:
            List of (row, col) tuples.
        """
        return [
            (row, col)
            for row in range(self.size)
            for col in range(self.size)
            if self.board[row][col] == Symbol.EMPTY
        ]

    @property
    def empty_count(self) -> int:
        """Number of cells still unplayed."""
        return sum(row.count(Symbol.EMPTY) for row in self.board)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        new_state = GameState(
            size=self.size,
            board=self.snapshot(),
            current_player=self.current_player,
        )
        return new_state

    def format_board(self, highlight: Optional[List[Tuple[int, int]]] = None) -> str:
        """
        Render the board with row and column indices.

        Args:
            highlight: Cells to mark with '*', e.g. the winning line.
        """
        highlight = set(highlight or [])
        width = len(str(self.size - 1))

        header = " " * (width + 1) + " ".join(
            f" {col:>{width}} " for col in range(self.size)
        )
        separator = " " * (width + 1) + "+".join("-" * (width + 2) for _ in range(self.size))

        lines = [header]
        for row in range(self.size):
            cells = []
            for col in range(self.size):
                mark = "*" if (row, col) in highlight else " "
                cells.append(f"{mark}{self.board[row][col].value:^{width}} ")
            lines.append(f"{row:>{width}} " + "|".join(cells))
            if row < self.size - 1:
                lines.append(separator)

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format_board()
