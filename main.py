"""
Console front end for noughts and crosses.

Play against the AI, let two people share the keyboard, or watch the AI
play itself. Moves are typed as "row col" with 0-based indices.

Run this script to play:
    python main.py                  # You play X against the AI
    python main.py --ai-first       # The AI plays X
    python main.py --size 4         # 4x4 board
    python main.py --ai-vs-ai       # Watch the AI play both sides
"""

import argparse
import logging
import sys
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from noughts import (
    AIPlayer,
    GameConfig,
    GameState,
    IllegalMoveError,
    MoveResult,
    ParallelAIPlayer,
    Symbol,
    WinChecker,
)


logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("q", "quit", "exit")
HINT_COMMANDS = ("h", "hint")


class QuitGame(Exception):
    """The player asked to leave the game."""


def parse_move(text: str) -> Tuple[int, int]:
    """
    Parse "row col" (or "row,col") into a pair of ints.

    Raises:
        ValueError: The text is not two integers.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Expected 'row col', got {text!r}")
    return int(parts[0]), int(parts[1])


class NoughtsAndCrossesGame:
    """
    Main controller for a console game.

    Game flow:
    1. The current player is asked for a move (human) or searches for one (AI)
    2. The move is applied and the board is printed
    3. Repeat until someone completes a line or the board is full
    """

    def __init__(
        self,
        size: int = GameConfig.DEFAULT_BOARD_SIZE,
        human_players: Iterable[Symbol] = (Symbol.CROSS,),
        depth: Optional[int] = None,
        parallel: bool = False,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print
    ):
        """
        Initialize the game.

        Args:
            size: Board side length.
            human_players: Symbols typed in by people. Everyone else is the AI.
            depth: AI search depth, None for exhaustive.
            parallel: Use the parallel fan-out search.
            input_func: Reads a line of human input.
            output: Writes a line of text.
        """
        self.config = GameConfig()
        self.game_state = GameState.create(size)
        self.win_checker = WinChecker()
        self.human_players = set(human_players)
        self.input = input_func
        self.output = output

        ai_class = ParallelAIPlayer if parallel else AIPlayer
        self.ais: Dict[Symbol, AIPlayer] = {
            player: ai_class(player, depth=depth, config=self.config)
            for player in (Symbol.CROSS, Symbol.NOUGHT)
            if player not in self.human_players
        }
        # Hints come from the same search, played from the human's side
        self.hint_ais: Dict[Symbol, AIPlayer] = {
            player: AIPlayer(player, depth=depth, config=self.config)
            for player in self.human_players
        }

        self.result: Optional[MoveResult] = None

    def start(self) -> int:
        """
        Play one game to the end.

        Returns:
            Process exit code.
        """
        self.output(f"\nNoughts and crosses on a {self.game_state.size}x{self.game_state.size} board")
        for player in (Symbol.CROSS, Symbol.NOUGHT):
            who = "Human" if player in self.human_players else "AI"
            self.output(f"   {player.value} plays: {who}")
        self.output("")
        self.output(self.game_state.format_board())

        try:
            self._game_loop()
        except QuitGame:
            self.output("\nGame quit by user.")
            return 0

        self._show_game_result()
        return 0

    def _game_loop(self):
        """Main game loop."""
        while self.result is None or not self.result.is_done:
            player = self.game_state.current_player

            if player in self.human_players:
                self.result = self._human_move(player)
            else:
                self.result = self._ai_move(player)

            self.output("")
            self.output(self.game_state.format_board())

    def _human_move(self, player: Symbol) -> MoveResult:
        """
        Ask a human for a move until a legal one is entered.

        Raises:
            QuitGame: The human typed a quit command or input ended.
        """
        while True:
            try:
                text = self.input(f"\n{player.value} to move (row col, h for hint, q to quit): ")
            except EOFError:
                raise QuitGame()

            command = text.strip().lower()
            if command in QUIT_COMMANDS:
                raise QuitGame()
            if command in HINT_COMMANDS:
                self.output(self.hint_ais[player].get_move_suggestion(self.game_state))
                continue

            try:
                row, col = parse_move(command)
                result = self.game_state.apply_move(row, col, player)
            except IllegalMoveError as e:
                self.output(f"Illegal move: {e}")
                continue
            except ValueError as e:
                self.output(f"Could not read move: {e}")
                continue

            logger.debug("Human %s played (%d, %d)", player.value, row, col)
            return result

    def _ai_move(self, player: Symbol) -> MoveResult:
        """Execute the AI's move."""
        self.output(f"\n>>> AI ({player.value}) is thinking...")

        ai = self.ais[player]
        row, col = ai.select_move(self.game_state)
        result = self.game_state.apply_move(row, col, player)

        self.output(f">>> AI ({player.value}) plays ({row}, {col})")
        return result

    def _show_game_result(self):
        """Show the final game result."""
        self.output("\n" + "=" * 40)
        self.output("   GAME OVER!")
        self.output("=" * 40)

        winner = self.result.winner
        if winner == Symbol.EMPTY:
            self.output("\nIt's a draw!")
            return

        line = self.win_checker.get_winning_line(self.game_state)
        self.output(self.game_state.format_board(highlight=line))

        if winner in self.human_players and len(self.human_players) == 1:
            self.output(f"\nCongratulations! {winner.value} wins!")
        elif winner in self.human_players:
            self.output(f"\n{winner.value} wins!")
        else:
            self.output(f"\nAI ({winner.value}) wins!")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Noughts and crosses on an n x n board")
    parser.add_argument(
        "--size",
        type=int,
        default=GameConfig.DEFAULT_BOARD_SIZE,
        help="Board side length (default: %(default)s)"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first (as X)"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--two-players",
        action="store_true",
        help="Two humans, no AI"
    )
    mode.add_argument(
        "--ai-vs-ai",
        action="store_true",
        help="The AI plays both sides"
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=None,
        help="AI search depth in plies (default: the whole game)"
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Search root moves in parallel threads"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.size < 1:
        parser.error("--size must be at least 1")
    if args.depth is not None and args.depth < 1:
        parser.error("--depth must be at least 1")

    config = GameConfig()
    logging.basicConfig(
        level=config.VERBOSE_LOG_LEVEL if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )

    # Determine players
    if args.two_players:
        human_players = (Symbol.CROSS, Symbol.NOUGHT)
    elif args.ai_vs_ai:
        human_players = ()
    elif args.ai_first:
        human_players = (Symbol.NOUGHT,)
    else:
        human_players = (Symbol.CROSS,)

    game = NoughtsAndCrossesGame(
        size=args.size,
        human_players=human_players,
        depth=args.depth,
        parallel=args.parallel,
    )

    try:
        return game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        return 0
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    sys.exit(main())
