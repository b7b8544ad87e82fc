"""
AI player for noughts and crosses.
Uses depth-limited minimax with alpha-beta pruning to choose a move.
"""

import logging
import threading
from typing import Optional, Tuple

from .config import GameConfig
from .game_state import GameState, Move, MoveResult
from .move_validator import MoveValidator
from .outcome import OutcomeEvaluator
from .symbols import Symbol
from .win_checker import WinChecker


logger = logging.getLogger(__name__)


class SearchCancelled(Exception):
    """Raised inside a search branch once its stop signal is set."""


class AIPlayer:
    """
    An AI that plays noughts and crosses using alpha-beta search.

    The search runs to depth size^2 by default, so on small boards it
    sees every continuation and plays perfectly against a perfect
    opponent. Leaves are scored by the OutcomeEvaluator from the AI's
    point of view. Among equally scored moves the first one in
    row-major order is played.
    """

    def __init__(
        self,
        player: Symbol = Symbol.NOUGHT,
        depth: Optional[int] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which symbol the AI plays (default: NOUGHT)
            depth: Search depth in plies. None searches to size^2.
            config: Game configuration.
        """
        if not player.is_player:
            raise ValueError("The AI must play CROSS or NOUGHT")
        if depth is not None and depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")

        self.player = player
        self.depth = depth
        self.config = config or GameConfig()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.evaluator = OutcomeEvaluator(self.config)

        # Keep track of how many positions we've evaluated (for debugging)
        self.nodes_evaluated = 0

    def select_move(self, game_state: GameState) -> Tuple[int, int]:
        """
        Get the best move for the current position.

        The game state is not modified, the search works on copies.
        Besides the turn check shared with apply_move, a finished game
        is refused up front since it has no move to return.

        Args:
            game_state: Current game state.

        Returns:
            (row, col) of the best move.

        Raises:
            WrongTurnError: It is not the AI's turn.
            ValueError: The game is already over.
        """
        self.validator.check_turn(game_state, self.player).raise_for_error()

        if self.win_checker.evaluate_terminal(game_state)[0]:
            raise ValueError("No legal moves: the game is over")

        self.nodes_evaluated = 0
        depth = self._search_depth(game_state)

        best = self._search_root(game_state.copy(), depth)

        logger.info(
            "AI %s evaluated %d positions. Best move: (%d, %d) (score: %d)",
            self.player.value, self.nodes_evaluated, best.row, best.col, best.score
        )

        return best.row, best.col

    def play(self, game_state: GameState) -> MoveResult:
        """
        Select a move and apply it to the game.

        Returns:
            MoveResult of the applied move.
        """
        row, col = self.select_move(game_state)
        return game_state.apply_move(row, col, self.player)

    def get_move_suggestion(self, game_state: GameState) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            game_state: Current game state.

        Returns:
            A string describing the suggested move.
        """
        if self.win_checker.evaluate_terminal(game_state)[0]:
            return "No moves available!"

        row, col = self.select_move(game_state)

        return f"Place {self.player.value} at position ({row}, {col})"

    def _search_depth(self, game_state: GameState) -> int:
        if self.depth is not None:
            return self.depth

        if game_state.size > self.config.MAX_EXHAUSTIVE_SIZE:
            logger.warning(
                "Exhaustive search on a %dx%d board may not finish; "
                "consider a depth limit",
                game_state.size, game_state.size
            )

        return game_state.size * game_state.size

    def _search_root(self, game_state: GameState, depth: int) -> Move:
        window = self.config.search_window(game_state.size)
        return self.search(game_state, depth, -window, window, -1, -1)

    def search(
        self,
        game_state: GameState,
        depth: int,
        alpha: int,
        beta: int,
        last_row: int,
        last_col: int,
        stop: Optional[threading.Event] = None
    ) -> Move:
        """
        Minimax with alpha-beta pruning.

        Args:
            game_state: Position to explore. Owned by this call.
            depth: Plies left to search.
            alpha: Best score the maximizing side is already assured of.
            beta: Best score the minimizing side is already assured of.
            last_row: Row of the move that led here.
            last_col: Column of the move that led here.
            stop: Optional signal to abandon the search.

        Returns:
            The best Move found. Its row/col are the move that led here
            for leaves; the caller overwrites them with its candidate.

        Raises:
            SearchCancelled: stop was set while searching.
        """
        if stop is not None and stop.is_set():
            raise SearchCancelled()

        self.nodes_evaluated += 1

        # Check depth limit and terminal states
        if depth == 0 or self.win_checker.evaluate_terminal(game_state)[0]:
            return Move(last_row, last_col, self.evaluator.evaluate(game_state, self.player))

        mover = game_state.current_player
        maximizing = mover == self.player
        best = Move(last_row, last_col, alpha if maximizing else beta)

        for row, col in game_state.get_empty_cells():
            child_state = game_state.copy()
            child_state.apply_move(row, col, mover)

            child = self.search(child_state, depth - 1, alpha, beta, row, col, stop)
            child.row = row
            child.col = col

            # Strict comparison: ties keep the earlier candidate
            if maximizing:
                if child.score > best.score:
                    best = child
                alpha = best.score
            else:
                if child.score < best.score:
                    best = child
                beta = best.score

            if beta <= alpha:
                break  # Prune

        return best
