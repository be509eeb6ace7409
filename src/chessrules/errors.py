"""Exception hierarchy for the rules engine.

Rejected move requests are reported as plain ``False`` results by
:func:`chessrules.engine.apply_move`; the exceptions here cover malformed
input text and internal invariant breaks.
"""

from __future__ import annotations


class ChessRulesError(Exception):
    """Base class for all errors raised by :mod:`chessrules`."""


class MalformedEncoding(ChessRulesError, ValueError):
    """A position record could not be parsed into a valid position."""


class InvalidMoveRequest(ChessRulesError, ValueError):
    """A move request does not name a legal move in the current position."""


class InvariantViolation(ChessRulesError, AssertionError):
    """An engine invariant was broken; this indicates a programming error."""
