"""
Game configuration for noughts and crosses.
All the tunable constants for the board, the evaluator and the search.
"""

import logging


class GameConfig:
    """
    Configuration class for game and AI settings.
    Command-line flags override the defaults where they exist.
    """

    # ==================== BOARD SETTINGS ====================
    # Classic noughts and crosses is 3x3
    DEFAULT_BOARD_SIZE = 3

    # ==================== EVALUATOR SETTINGS ====================
    # A fully won line scores +/- SENTINEL_FACTOR * size^2,
    # which dominates the sum of all partial lines
    SENTINEL_FACTOR = 3

    # ==================== SEARCH SETTINGS ====================
    # Root alpha-beta window is +/- SEARCH_WINDOW_FACTOR * size^2,
    # strictly wider than any score the evaluator can return
    SEARCH_WINDOW_FACTOR = 10

    # Exhaustive (depth = size^2) search is only practical up to this size
    MAX_EXHAUSTIVE_SIZE = 4

    # Thread count for the parallel fan-out search
    PARALLEL_WORKERS = 4

    # ==================== LOGGING SETTINGS ====================
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    LOG_LEVEL = logging.INFO
    VERBOSE_LOG_LEVEL = logging.DEBUG

    def sentinel(self, size: int) -> int:
        """Score of a fully won line on a size x size board."""
        return self.SENTINEL_FACTOR * size * size

    def search_window(self, size: int) -> int:
        """Half-width of the root alpha-beta window."""
        return self.SEARCH_WINDOW_FACTOR * size * size
