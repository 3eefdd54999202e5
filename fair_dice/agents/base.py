from abc import ABC, abstractmethod
from typing import List, Sequence

from fair_dice.core.config import GameConfig
from fair_dice.core.dice import DiceSet


class Agent(ABC):
    """
    Abstract base class for opponent agents.
    An agent only chooses the opponent's dice set; every random decision goes through the fair random generator.
    """

    @classmethod
    def from_config(cls, config: GameConfig) -> "Agent":
        """
        Build the agent for a game. Agents that read rule options override this.
        """
        return cls()

    @abstractmethod
    def choose_dice(self, dice_sets: Sequence[DiceSet], available: List[int]) -> int:
        """
        Pick the opponent's dice set.
        Args:
            dice_sets (sequence[DiceSet]): All dice sets of the game.
            available (list[int]): Indices not yet taken, in ascending order. Never empty.
        Returns:
            int: One of the available indices.
        """
        raise NotImplementedError
