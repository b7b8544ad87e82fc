"""
Parallel fan-out search for noughts and crosses.

Each root move is searched in its own worker. Results come back through
one future per branch and are committed in row-major order, so ties go
to the earliest move exactly like the serial AIPlayer. Once a committed
move reaches the winning sentinel no later sibling can beat it, and a
stop signal is broadcast to the branches still running.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional, Tuple

from .ai_player import AIPlayer, SearchCancelled
from .config import GameConfig
from .game_state import GameState, Move
from .symbols import Symbol


logger = logging.getLogger(__name__)


class ParallelAIPlayer(AIPlayer):
    """
    AIPlayer that explores sibling root moves concurrently.

    Branches share no search state: each owns a copy of the board and
    searches the full root window. Returns the same move as AIPlayer.
    """

    def __init__(
        self,
        player: Symbol = Symbol.NOUGHT,
        depth: Optional[int] = None,
        config: Optional[GameConfig] = None,
        workers: Optional[int] = None
    ):
        super().__init__(player, depth, config)
        self.workers = self.config.PARALLEL_WORKERS if workers is None else workers
        if self.workers < 1:
            raise ValueError(f"Need at least one worker, got {self.workers}")
        self.branches_cancelled = 0
        self._counter_lock = threading.Lock()

    def _search_root(self, game_state: GameState, depth: int) -> Move:
        window = self.config.search_window(game_state.size)
        sentinel = self.config.sentinel(game_state.size)
        mover = game_state.current_player
        stop = threading.Event()
        self.branches_cancelled = 0

        self.nodes_evaluated += 1
        candidates = game_state.get_empty_cells()
        best = Move(-1, -1, -window)

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            branches: List[Tuple[Tuple[int, int], Future]] = []
            for row, col in candidates:
                child_state = game_state.copy()
                child_state.apply_move(row, col, mover)
                future = executor.submit(
                    self._search_branch, child_state, depth - 1, -window, window, row, col, stop
                )
                branches.append(((row, col), future))

            for index, ((row, col), future) in enumerate(branches):
                child = future.result()
                child.row = row
                child.col = col

                if child.score > best.score:
                    best = child

                if best.score >= sentinel:
                    remaining = branches[index + 1:]
                    if remaining:
                        logger.debug(
                            "Winning move (%d, %d) found, cancelling %d branches",
                            row, col, len(remaining)
                        )
                    stop.set()
                    for _, pending in remaining:
                        pending.cancel()
                    self.branches_cancelled = len(remaining)
                    break

        return best

    def _search_branch(
        self,
        game_state: GameState,
        depth: int,
        alpha: int,
        beta: int,
        row: int,
        col: int,
        stop: threading.Event
    ) -> Optional[Move]:
        # A separate counter per branch, merged after the search
        searcher = AIPlayer(self.player, self.depth, self.config)
        try:
            return searcher.search(game_state, depth, alpha, beta, row, col, stop)
        except SearchCancelled:
            logger.debug("Branch (%d, %d) cancelled", row, col)
            return None
        finally:
            with self._counter_lock:
                self.nodes_evaluated += searcher.nodes_evaluated

