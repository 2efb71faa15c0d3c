"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from varchess.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable (from, to) pair.

    A move carries no board of its own; its legality is only meaningful
    against the snapshot and side it was generated for.
    """

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        (fr, fc), (tr, tc) = self.from_sq, self.to_sq
        return f"{fr},{fc}->{tr},{tc}"
