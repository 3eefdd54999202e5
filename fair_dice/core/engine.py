"""
engine.py
Implements the GameEngine class, the state machine that runs one game: who moves first, dice selection,
the opponent's throw, the human's throw and the final comparison.
Every random decision is a commit/reveal exchange with the fair random generator; the key of a commitment
is revealed only after the human's answer for that exchange has been collected.
Related modules:
- fair_random.py: FairRandom and Commitment.
- state.py: GameState, PlayerState and the phase names.
- outcome.py: Face comparison.
- fair_dice.ui.base: ChoiceCollector and Display, the engine's only I/O.
- fair_dice.agents: Chooses the opponent's dice set.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .config import GameConfig
from .dice import DiceSet
from .errors import IllegalMoveError, TooFewDiceSets
from .fair_random import Commitment, FairRandom, to_hex
from .outcome import resolve as resolve_outcome
from .state import (
    ABORTED,
    DETERMINE_FIRST_MOVE,
    DONE,
    HUMAN_THROW,
    INIT,
    OPPONENT_THROW,
    RESOLVE,
    SELECT_DICE,
    TERMINAL_PHASES,
    GameState,
    PlayerState,
)
from fair_dice.agents.base import Agent
from fair_dice.agents.fixed_agent import FixedIndexAgent
from fair_dice.ui.base import ChoiceCollector, Display, Signal

logger = logging.getLogger(__name__)


def combine(secret_value: int, contribution: int, modulo: int = 6) -> int:
    """
    The number exchange shown during each throw: (secret_value mod m + contribution) mod m.
    It is displayed only; the face is selected by secret_value itself.
    """
    return (secret_value % modulo + contribution) % modulo


class GameEngine:
    """
    State machine for one fair dice game between a human and an automated opponent.
    All interaction goes through the injected collector and display.
    """
    def __init__(self,
                 dice_sets: Sequence[DiceSet],
                 collector: ChoiceCollector,
                 display: Display,
                 config: GameConfig = None,
                 generator: FairRandom = None,
                 agent: Agent = None):
        """
        Args:
            dice_sets (sequence[DiceSet]): Validated dice sets, at least config.min_dice_sets of them.
            collector (ChoiceCollector): Reads the human's choices.
            display (Display): Receives every line shown to the human.
            config (GameConfig, optional): Rules. Defaults to GameConfig().
            generator (FairRandom, optional): Fair random generator. Defaults to one over the OS CSPRNG.
            agent (Agent, optional): Opponent's dice picker. Defaults to FixedIndexAgent(default_opponent_index).
        Raises:
            TooFewDiceSets: If fewer dice sets than required are given.
        """
        self.config = config or GameConfig()
        if len(dice_sets) < self.config.min_dice_sets:
            raise TooFewDiceSets(len(dice_sets), self.config.min_dice_sets)
        self.collector = collector
        self.display = display
        self.generator = generator or FairRandom(key_size=self.config.key_size)
        self.agent = agent or FixedIndexAgent.from_config(self.config)
        self.state = GameState(dice_sets=list(dice_sets))
        self._events: List[Dict] = []

    def _emit(self, event: Dict):
        """
        Internal: Record an event (dict) tagged with the current phase.
        """
        event.setdefault("phase", self.state.status)
        self._events.append(event)

    def pop_events(self):
        """
        Return and clear all emitted events since last call.
        Returns:
            list[dict]: List of event dicts.
        """
        ev = list(self._events)
        self._events.clear()
        return ev

    def get_events(self):
        """
        Return all events emitted so far (does not clear).
        Returns:
            list[dict]: List of event dicts.
        """
        return list(self._events)

    def is_terminal(self) -> bool:
        return self.state.status in TERMINAL_PHASES

    def _enter(self, phase: str) -> None:
        logger.debug("Phase %s -> %s", self.state.status, phase)
        self.state.status = phase

    def _abort(self) -> None:
        phase = self.state.status
        self._enter(ABORTED)
        self._emit({"type": "GameAborted", "phase": phase})
        logger.info("Game aborted by the human during %s", phase)

    def _collect(self, options: Dict[int, str]) -> Optional[int]:
        """
        Internal: Ask the collector for one of options. Returns None after aborting on an exit signal.
        """
        choice = self.collector.choose(options)
        if choice is Signal.EXIT:
            self._abort()
            return None
        self._emit({"type": "ResponseCollected", "value": choice})
        return choice

    def _fair_exchange(self, purpose: str, low: int, high: int,
                       options: Dict[int, str], prompt: str) -> Optional[Tuple[Commitment, int]]:
        """
        Internal: One commit/reveal run. The digest is shown and the human's answer collected before the key is revealed.
        Args:
            purpose (str): Label of the decision point, recorded in events.
            low (int), high (int): Inclusive range of the committed draw.
            options (dict[int, str]): Answers offered to the human.
            prompt (str): Line shown after the digest.
        Returns:
            (Commitment, int) | None: The revealed commitment and the human's answer, or None if the human exited.
        """
        commitment = self.generator.commit(low, high)
        self._emit({"type": "CommitmentIssued", "purpose": purpose, "low": low, "high": high,
                    "digest": commitment.digest_hex})
        self.display.show(f"I selected a random value in the range {low}..{high} (HMAC={commitment.digest_hex}).")
        self.display.show(prompt)

        answer = self._collect(options)
        if answer is None:
            return None

        key = commitment.reveal()
        verified = commitment.verify()
        self._emit({"type": "CommitmentRevealed", "purpose": purpose, "value": commitment.secret_value,
                    "key": to_hex(key), "digest": commitment.digest_hex, "verified": verified})
        logger.debug("Revealed %s: value=%d KEY=%s", purpose, commitment.secret_value, to_hex(key))
        return commitment, answer

    def play(self) -> GameState:
        """
        Run the whole game. Returns the final state, whose status is DONE or ABORTED.
        Raises:
            IllegalMoveError: If the game was already played.
            EntropySourceUnavailable: If the secure random source fails.
        """
        if self.state.status != INIT:
            raise IllegalMoveError("Game has already been played")
        self._emit({"type": "GameStarted", "dice_sets": [list(d) for d in self.state.dice_sets]})
        for step in (self.determine_first_move, self.select_dice, self.opponent_throw,
                     self.human_throw, self.resolve):
            if not step():
                break
        return self.state

    def determine_first_move(self) -> bool:
        """
        Commit to 0 or 1 and let the human guess it; a correct guess gives the human the first move.
        Returns:
            bool: False if the human exited.
        """
        self._enter(DETERMINE_FIRST_MOVE)
        self.display.show("Let's determine who makes the first move.")
        result = self._fair_exchange("first_move", 0, 1, {0: "0", 1: "1"}, "Try to guess my selection.")
        if result is None:
            return False
        commitment, guess = result
        self.display.show(f"My selection: {commitment.secret_value} (KEY={to_hex(commitment.reveal())}).")
        self.state.human_first = guess == commitment.secret_value
        return True

    def _dice_label(self, index: int) -> str:
        return f"[{self.state.dice_sets[index]}]"

    def _human_picks(self) -> bool:
        available = self.state.available_indices()
        options = {i: str(self.state.dice_sets[i]) for i in available}
        index = self._collect(options)
        if index is None:
            return False
        self.state.human.dice_index = index
        self._emit({"type": "DiceChosen", "player": "human", "index": index})
        self.display.show(f"You chose the {self._dice_label(index)} dice.")
        return True

    def _opponent_picks(self) -> None:
        available = self.state.available_indices()
        index = self.agent.choose_dice(self.state.dice_sets, available)
        if index not in available:
            raise IllegalMoveError(f"Agent chose dice set {index}, available: {available}")
        self.state.opponent.dice_index = index
        self._emit({"type": "DiceChosen", "player": "opponent", "index": index})
        self.display.show(f"I choose the {self._dice_label(index)} dice.")

    def select_dice(self) -> bool:
        """
        Assign dice sets in turn order; whoever picks second cannot take the first player's set.
        Returns:
            bool: False if the human exited.
        """
        self._enter(SELECT_DICE)
        if self.state.human_first:
            self.display.show("You make the first move. Choose your dice:")
            if not self._human_picks():
                return False
            self._opponent_picks()
        else:
            self.display.show("I make the first move and choose the dice.")
            self._opponent_picks()
            self.display.show("Now, choose your dice:")
            if not self._human_picks():
                return False
        return True

    def _throw(self, player: PlayerState, purpose: str) -> bool:
        dice = self.state.dice_of(player)
        modulo = self.config.modulo
        result = self._fair_exchange(purpose, 0, len(dice) - 1,
                                     {i: str(i) for i in range(modulo)},
                                     f"Add your number modulo {modulo}.")
        if result is None:
            return False
        commitment, contribution = result
        value = commitment.secret_value
        combined = combine(value, contribution, modulo)
        self.display.show(f"My number is {value} (KEY={to_hex(commitment.reveal())}).")
        self.display.show(f"The result is {value % modulo} + {contribution} = {combined} (mod {modulo}).")

        player.throw_index = value
        player.contribution = contribution
        face = dice[value]
        self._emit({"type": "ThrowResolved", "player": player.name, "index": value, "face": face,
                    "contribution": contribution, "combined": combined})
        return True

    def opponent_throw(self) -> bool:
        self._enter(OPPONENT_THROW)
        self.display.show("It's time for my throw.")
        if not self._throw(self.state.opponent, "opponent_throw"):
            return False
        self.display.show(f"My throw is {self.state.dice_of(self.state.opponent)[self.state.opponent.throw_index]}.")
        return True

    def human_throw(self) -> bool:
        self._enter(HUMAN_THROW)
        self.display.show("It's time for your throw.")
        if not self._throw(self.state.human, "human_throw"):
            return False
        self.display.show(f"Your throw is {self.state.dice_of(self.state.human)[self.state.human.throw_index]}.")
        return True

    def resolve(self) -> bool:
        """
        Compare the two thrown faces and finish the game.
        """
        self._enter(RESOLVE)
        human, opponent = self.state.human, self.state.opponent
        outcome = resolve_outcome(self.state.dice_of(human)[human.throw_index],
                                  self.state.dice_of(opponent)[opponent.throw_index])
        self.state.outcome = outcome
        self.display.show(outcome.describe())
        self._emit({"type": "GameEnded", "winner": outcome.winner,
                    "human_face": outcome.human_face, "opponent_face": outcome.opponent_face})
        self._enter(DONE)
        return True
