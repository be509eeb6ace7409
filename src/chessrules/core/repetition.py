"""Board-signature history used for threefold-repetition detection."""

from __future__ import annotations

from collections import Counter


class RepetitionTracker:
    """Append-only record of board-only position signatures.

    One signature is recorded for the starting position and one after every
    applied move. Signatures ignore side to move, castling rights and clocks.
    """

    __slots__ = ("_signatures", "_counts")

    def __init__(self, signatures: tuple[str, ...] | list[str] = ()) -> None:
        self._signatures: list[str] = list(signatures)
        self._counts: Counter[str] = Counter(self._signatures)

    def record(self, signature: str) -> None:
        self._signatures.append(signature)
        self._counts[signature] += 1

    def count(self, signature: str) -> int:
        """How many times *signature* has been recorded."""
        return self._counts[signature]

    @property
    def signatures(self) -> tuple[str, ...]:
        return tuple(self._signatures)

    @property
    def last(self) -> str | None:
        return self._signatures[-1] if self._signatures else None

    def copy(self) -> RepetitionTracker:
        return RepetitionTracker(self._signatures)

    def __len__(self) -> int:
        return len(self._signatures)
