"""
Outcome evaluator for noughts and crosses.
Scores a board from one player's point of view.
"""

from typing import List, Optional, Tuple, TYPE_CHECKING

from .config import GameConfig
from .symbols import Symbol

if TYPE_CHECKING:
    from .game_state import GameState


class OutcomeEvaluator:
    """
    Heuristic scoring of a position.

    Every row, column and main diagonal gets a line sum:
    - empty cells are skipped
    - a line holding both symbols is blocked and sums to 0
    - otherwise each symbol counts +1 for the player, -1 for the opponent

    A line filled by one symbol scores the sentinel +/- 3 * size^2 on its own.
    Otherwise the score is the sum of all line sums. A drawn full board
    has every line blocked and scores 0.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def evaluate(self, game_state: "GameState", player: Symbol) -> int:
        """
        Score the position for a player.

        Args:
            game_state: Position to score.
            player: Whose point of view (CROSS or NOUGHT).

        Returns:
            Integer score, positive when the position favours player.
            0 if player is not CROSS or NOUGHT.
        """
        if not player.is_player:
            return 0

        board = game_state.board
        size = game_state.size
        sentinel = self.config.sentinel(size)
        total = 0

        for i in range(size):
            row_sum = self._line_sum(board, [(i, j) for j in range(size)], player)
            col_sum = self._line_sum(board, [(j, i) for j in range(size)], player)

            if row_sum == size or col_sum == size:
                return sentinel
            if row_sum == -size or col_sum == -size:
                return -sentinel

            total += row_sum + col_sum

        for line in (
            [(i, i) for i in range(size)],
            [(i, size - 1 - i) for i in range(size)],
        ):
            diagonal_sum = self._line_sum(board, line, player)

            if diagonal_sum == size:
                return sentinel
            if diagonal_sum == -size:
                return -sentinel

            total += diagonal_sum

        return total

    def sentinel(self, size: int) -> int:
        """Score of a fully won line on a size x size board."""
        return self.config.sentinel(size)

    def _line_sum(
        self,
        board: List[List[Symbol]],
        line: List[Tuple[int, int]],
        player: Symbol
    ) -> int:
        owner = Symbol.EMPTY
        line_sum = 0

        for row, col in line:
            cell = board[row][col]
            if cell == Symbol.EMPTY:
                continue

            if owner == Symbol.EMPTY:
                owner = cell

            # Both symbols on the line: nobody can complete it
            if cell != owner:
                return 0

            line_sum += 1 if cell == player else -1

        return line_sum
