"""
Move validator for noughts and crosses.
Validates that moves follow the rules and defines the move errors.
"""

from enum import Enum
from typing import Optional, TYPE_CHECKING
from dataclasses import dataclass

from .symbols import Symbol

if TYPE_CHECKING:
    from .game_state import GameState


class MoveErrorKind(Enum):
    """Why a move was rejected."""
    WRONG_TURN = "wrong_turn"
    OUT_OF_BOUNDS = "out_of_bounds"
    CELL_OCCUPIED = "cell_occupied"


class IllegalMoveError(Exception):
    """
    Raised when a move or a search is requested that breaks the rules.

    The game state is left untouched. Callers may retry with another move.
    """
    kind: Optional[MoveErrorKind] = None

    def __init__(self, message: str, row: Optional[int] = None, col: Optional[int] = None):
        super().__init__(message)
        self.row = row
        self.col = col


class WrongTurnError(IllegalMoveError):
    """The player asking to move is not the current player."""
    kind = MoveErrorKind.WRONG_TURN


class OutOfBoundsError(IllegalMoveError):
    """The coordinates are outside the board."""
    kind = MoveErrorKind.OUT_OF_BOUNDS


class CellOccupiedError(IllegalMoveError):
    """The target cell already holds a symbol."""
    kind = MoveErrorKind.CELL_OCCUPIED


ERRORS_BY_KIND = {
    MoveErrorKind.WRONG_TURN: WrongTurnError,
    MoveErrorKind.OUT_OF_BOUNDS: OutOfBoundsError,
    MoveErrorKind.CELL_OCCUPIED: CellOccupiedError,
}


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveErrorKind] = None
    error_message: Optional[str] = None

    def raise_for_error(self, row: Optional[int] = None, col: Optional[int] = None):
        """Raise the matching IllegalMoveError if the move was rejected."""
        if self.is_valid:
            return
        raise ERRORS_BY_KIND[self.error](self.error_message, row, col)


class MoveValidator:
    """
    Validates noughts and crosses moves.

    Rules, checked in this order:
    1. Only the current player may move
    2. The cell must be on the board
    3. The cell must be empty

    A finished game is not rejected here. Callers stop issuing moves
    once a move reports the game is done.
    """

    def check_turn(self, game_state: "GameState", player: Symbol) -> ValidationResult:
        """
        Check that it is the given player's turn.

        Args:
            game_state: Current game state.
            player: The player asking to move (or to search).

        Returns:
            ValidationResult with is_valid and error.
        """
        if player != game_state.current_player:
            return ValidationResult(
                is_valid=False,
                error=MoveErrorKind.WRONG_TURN,
                error_message=(
                    f"Not {player.name}'s turn, "
                    f"{game_state.current_player.name} is to move"
                ),
            )
        return ValidationResult(is_valid=True)

    def validate_move(
        self,
        game_state: "GameState",
        row: int,
        col: int,
        player: Symbol
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to mark (0 to size-1).
            col: Column to mark (0 to size-1).
            player: The player making the move.

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        turn = self.check_turn(game_state, player)
        if not turn.is_valid:
            return turn

        size = game_state.size
        if not (0 <= row < size and 0 <= col < size):
            return ValidationResult(
                is_valid=False,
                error=MoveErrorKind.OUT_OF_BOUNDS,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{size - 1}.",
            )

        occupant = game_state.board[row][col]
        if occupant != Symbol.EMPTY:
            return ValidationResult(
                is_valid=False,
                error=MoveErrorKind.CELL_OCCUPIED,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.value}",
            )

        return ValidationResult(is_valid=True)
