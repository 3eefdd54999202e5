from typing import List, Sequence

from .base import Agent
from . import register_agent
from fair_dice.core.dice import DiceSet


@register_agent("highest_mean")
class HighestMeanAgent(Agent):
    """
    Takes the available dice set with the highest mean face; ties go to the lowest index.
    """

    def choose_dice(self, dice_sets: Sequence[DiceSet], available: List[int]) -> int:
        best = available[0]
        for i in available[1:]:
            if dice_sets[i].mean() > dice_sets[best].mean():
                best = i
        return best
