"""
Board symbols for noughts and crosses.
"""

from enum import Enum


class Symbol(Enum):
    """The value held by a board cell."""
    EMPTY = " "
    CROSS = "X"     # Always moves first
    NOUGHT = "O"

    def opposite(self) -> "Symbol":
        """Get the opposite player. EMPTY has no opposite."""
        if self == Symbol.CROSS:
            return Symbol.NOUGHT
        if self == Symbol.NOUGHT:
            return Symbol.CROSS
        raise ValueError("EMPTY is not a player")

    @property
    def is_player(self) -> bool:
        return self != Symbol.EMPTY

    @classmethod
    def from_char(cls, char: str) -> "Symbol":
        """
        Parse a single board character.

        Accepts 'X', 'O' (either case) and ' ', '.' or '-' for an empty cell.
        """
        upper = char.upper()
        if upper in (" ", ".", "-"):
            return cls.EMPTY
        for symbol in cls:
            if symbol.value == upper:
                return symbol
        raise ValueError(f"Unknown board character: {char!r}")
