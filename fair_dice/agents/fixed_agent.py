from typing import List, Sequence

from .base import Agent
from . import register_agent
from fair_dice.core.config import GameConfig
from fair_dice.core.dice import DiceSet


@register_agent("fixed")
class FixedIndexAgent(Agent):
    """
    Always takes the dice set at a fixed index. If the human already holds it,
    falls back to the lowest available index so the two players never share a set.
    """
    def __init__(self, index: int = 0):
        """
        Args:
            index: Preferred dice set index.
        """
        self.index = index

    @classmethod
    def from_config(cls, config: GameConfig) -> "FixedIndexAgent":
        return cls(index=config.default_opponent_index)

    def choose_dice(self, dice_sets: Sequence[DiceSet], available: List[int]) -> int:
        if self.index in available:
            return self.index
        return available[0]
