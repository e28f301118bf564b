"""A single lint failure."""

from __future__ import annotations

import os
from dataclasses import dataclass

from protolinter.nodes import Position


@dataclass(frozen=True)
class Failure:
    """A problem found by a rule at a position."""

    pos: Position
    message: str
    rule_id: str

    def __str__(self) -> str:
        return f"[{self.pos}] {self.message}"

    def filename_without_ext(self) -> str:
        """The failure's filename with its extension removed."""
        name = self.pos.filename
        base_start = max(name.rfind("/"), name.rfind(os.sep))
        dot = name.rfind(".")
        if dot > base_start:
            return name[:dot]
        return name