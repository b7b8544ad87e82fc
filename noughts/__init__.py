"""
Noughts and crosses on an n x n board.
Handles game state, rules, position scoring and the AI opponent.
"""

from .symbols import Symbol
from .config import GameConfig
from .game_state import GameState, Move, MoveResult
from .move_validator import (
    MoveValidator,
    ValidationResult,
    MoveErrorKind,
    IllegalMoveError,
    WrongTurnError,
    OutOfBoundsError,
    CellOccupiedError,
)
from .win_checker import WinChecker
from .outcome import OutcomeEvaluator
from .ai_player import AIPlayer, SearchCancelled
from .parallel_search import ParallelAIPlayer

__version__ = "0.1.0"
