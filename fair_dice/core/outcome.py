"""
outcome.py
Resolves a game by comparing the two thrown faces.
Related modules:
- engine.py: Calls resolve() in the RESOLVE phase.
"""

from dataclasses import dataclass
from typing import Optional

HUMAN = "human"
OPPONENT = "opponent"


@dataclass(frozen=True)
class Outcome:
    """
    Result of comparing the human's face with the opponent's face.
    Fields:
        human_face (int): Face thrown for the human.
        opponent_face (int): Face thrown for the opponent.
        winner (str|None): HUMAN, OPPONENT, or None for a tie.
    """
    human_face: int
    opponent_face: int
    winner: Optional[str]

    @property
    def is_tie(self) -> bool:
        return self.winner is None

    def describe(self) -> str:
        if self.winner == HUMAN:
            return f"You win ({self.human_face} > {self.opponent_face})!"
        if self.winner == OPPONENT:
            return f"I win ({self.opponent_face} > {self.human_face})!"
        return f"It's a tie ({self.human_face} == {self.opponent_face})!"


def resolve(human_face: int, opponent_face: int) -> Outcome:
    """
    Strictly greater face wins; equal faces tie.
    Args:
        human_face (int): Human's face value.
        opponent_face (int): Opponent's face value.
    Returns:
        Outcome: The comparison result.
    """
    if human_face > opponent_face:
        winner = HUMAN
    elif human_face < opponent_face:
        winner = OPPONENT
    else:
        winner = None
    return Outcome(human_face=human_face, opponent_face=opponent_face, winner=winner)
