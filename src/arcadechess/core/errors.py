"""Exceptions raised by the rules core."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for rules-core errors."""


class IllegalMove(ChessError):
    """The requested move is not in the legal set for the side to move.

    Recoverable: the caller simply ignores the request or asks again.
    """


class NoKingFound(ChessError):
    """A color has no king on the board.

    Indicates a corrupted board; never raised in normal play.
    """
