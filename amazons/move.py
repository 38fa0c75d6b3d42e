"""A complete turn: an amazon move followed by an arrow shot."""

from __future__ import annotations

from dataclasses import dataclass, field

from amazons.position import Position


@dataclass(frozen=True)
class Move:
    """Amazon moves from ``origin`` to ``destination`` and shoots at ``arrow``."""

    origin: Position = field(default_factory=Position)
    destination: Position = field(default_factory=Position)
    arrow: Position = field(default_factory=Position)

    def __str__(self) -> str:
        return f"{self.origin} {self.destination} {self.arrow}"

    @classmethod
    def from_string(cls, text: str) -> Move:
        """Parse six whitespace-separated integers into a move."""
        tokens = text.split()
        try:
            values = [int(token) for token in tokens[:6]]
        except ValueError:
            raise ValueError(
                "Invalid move string format: expected 6 numbers"
            ) from None
        if len(values) < 6:
            raise ValueError("Invalid move string format: expected 6 numbers")
        if len(tokens) > 6:
            raise ValueError("Invalid move string format - extra characters")
        return cls(
            Position(values[0], values[1]),
            Position(values[2], values[3]),
            Position(values[4], values[5]),
        )

    def is_valid(self) -> bool:
        """Return True if all three squares lie on the board."""
        return (
            self.origin.is_valid()
            and self.destination.is_valid()
            and self.arrow.is_valid()
        )