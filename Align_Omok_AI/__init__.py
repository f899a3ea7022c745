"""Align_Omok_AI package exports."""

from .errors import (
    AlignmentError,
    CellOccupied,
    IllegalMove,
    InvalidColor,
    InvalidConfig,
    NoLegalMoves,
    OutOfBounds,
)
from .Stone import Color, Stone
from .Board import Board
from .Omokgame import Omokgame
from .Player import Player, HumanPlayer
from .AIPlayer import AIPlayer

# Subpackages for geometry/referee, move evaluation, and helpers
from . import ai, engine, utils

__all__ = [
    "AlignmentError",
    "CellOccupied",
    "IllegalMove",
    "InvalidColor",
    "InvalidConfig",
    "NoLegalMoves",
    "OutOfBounds",
    "Color",
    "Stone",
    "Board",
    "Omokgame",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "ai",
    "engine",
    "utils",
]
