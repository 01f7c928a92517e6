"""GameState - resource balance, score and the terminal flag."""
from __future__ import annotations

from dataclasses import dataclass

from tick_lawn.types import PlantKind


@dataclass
class GameState:
    balance: int
    score: int = 0
    terminal: bool = False
    selected: PlantKind | None = None

    def end(self) -> bool:
        """Mark the game as lost. Returns True only on the first call."""
        if self.terminal:
            return False
        self.terminal = True
        return True

    def restart(self, balance: int) -> None:
        self.balance = balance
        self.score = 0
        self.terminal = False
        self.selected = None
