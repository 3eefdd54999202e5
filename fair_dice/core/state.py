"""
state.py
Defines the game state dataclasses: PlayerState and GameState, plus the phase names of the game state machine.
Related modules:
- engine.py: Mutates and reads GameState during play.
- dice.py: DiceSet is held in GameState.
- outcome.py: Outcome is stored once the game is resolved.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .dice import DiceSet
from .outcome import Outcome

INIT = "INIT"
DETERMINE_FIRST_MOVE = "DETERMINE_FIRST_MOVE"
SELECT_DICE = "SELECT_DICE"
OPPONENT_THROW = "OPPONENT_THROW"
HUMAN_THROW = "HUMAN_THROW"
RESOLVE = "RESOLVE"
DONE = "DONE"
ABORTED = "ABORTED"

TERMINAL_PHASES = (DONE, ABORTED)


@dataclass
class PlayerState:
    """
    Per-player state for one game.
    Fields:
        name (str): "human" or "opponent".
        dice_index (int|None): Index of the chosen dice set.
        throw_index (int|None): Committed face index of this player's throw.
        contribution (int|None): Human-supplied number in the modulo exchange for this player's throw.
    """
    name: str
    dice_index: Optional[int] = None
    throw_index: Optional[int] = None
    contribution: Optional[int] = None


@dataclass
class GameState:
    """
    Composite state for one game.
    Fields:
        dice_sets (list[DiceSet]): All dice sets offered in this game.
        human (PlayerState): The human player.
        opponent (PlayerState): The automated opponent.
        status (str): Current phase (INIT ... DONE | ABORTED).
        human_first (bool|None): Whether the human guessed the first-move draw.
        outcome (Outcome|None): Set in RESOLVE.
    """
    dice_sets: List[DiceSet]
    human: PlayerState = field(default_factory=lambda: PlayerState("human"))
    opponent: PlayerState = field(default_factory=lambda: PlayerState("opponent"))
    status: str = INIT
    human_first: Optional[bool] = None
    outcome: Optional[Outcome] = None

    def taken_indices(self) -> List[int]:
        return [p.dice_index for p in (self.human, self.opponent) if p.dice_index is not None]

    def available_indices(self) -> List[int]:
        taken = self.taken_indices()
        return [i for i in range(len(self.dice_sets)) if i not in taken]

    def dice_of(self, player: PlayerState) -> DiceSet:
        return self.dice_sets[player.dice_index]
