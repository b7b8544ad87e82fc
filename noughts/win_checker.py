"""
Win checker for noughts and crosses.
Checks if a player has filled a line or if the game is a draw.
"""

from typing import Optional, List, Tuple, TYPE_CHECKING

from .symbols import Symbol

if TYPE_CHECKING:
    from .game_state import GameState


Line = List[Tuple[int, int]]


class WinChecker:
    """
    Checks for terminal states on an n x n board.

    Win condition: a full row, column or main diagonal holding
    a single player's symbol. Draw: no empty cell and no win.
    """

    def evaluate_terminal(self, game_state: "GameState") -> Tuple[bool, Symbol]:
        """
        Decide whether the game is over and who won.

        Rows and columns are checked pairwise by index, then the main
        diagonal, then the anti-diagonal. The first full line wins.

        Args:
            game_state: The game state to inspect.

        Returns:
            (is_done, winner). winner is Symbol.EMPTY for a draw
            or when the game is still running.
        """
        line = self._first_full_line(game_state.board, game_state.size)
        if line is not None:
            row, col = line[0]
            return True, game_state.board[row][col]

        for row in game_state.board:
            for cell in row:
                if cell == Symbol.EMPTY:
                    return False, Symbol.EMPTY

        return True, Symbol.EMPTY

    def check_winner(self, game_state: "GameState") -> Optional[Symbol]:
        """
        Check if there's a winner.

        Returns:
            The winning Symbol, or None if no line is complete.
        """
        is_done, winner = self.evaluate_terminal(game_state)
        if is_done and winner != Symbol.EMPTY:
            return winner
        return None

    def check_draw(self, game_state: "GameState") -> bool:
        """True if the board is full and nobody has a complete line."""
        is_done, winner = self.evaluate_terminal(game_state)
        return is_done and winner == Symbol.EMPTY

    def get_winning_line(self, game_state: "GameState") -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        return self._first_full_line(game_state.board, game_state.size)

    def _first_full_line(self, board: List[List[Symbol]], size: int) -> Optional[Line]:
        for i in range(size):
            row = [(i, j) for j in range(size)]
            if self._is_full_line(board, row):
                return row

            column = [(j, i) for j in range(size)]
            if self._is_full_line(board, column):
                return column

        diagonal = [(i, i) for i in range(size)]
        if self._is_full_line(board, diagonal):
            return diagonal

        anti_diagonal = [(i, size - 1 - i) for i in range(size)]
        if self._is_full_line(board, anti_diagonal):
            return anti_diagonal

        return None

    def _is_full_line(self, board: List[List[Symbol]], line: Line) -> bool:
        """
        Check if a single line is filled by one player.

        Stops at the first empty or mismatching cell.
        """
        first_row, first_col = line[0]
        owner = board[first_row][first_col]
        if owner == Symbol.EMPTY:
            return False

        for row, col in line[1:]:
            if board[row][col] != owner:
                return False

        return True
