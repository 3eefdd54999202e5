"""
base.py
The I/O boundary of the game: the Display sink and the ChoiceCollector that reads bounded choices from the human.
The engine only talks to these interfaces, so console and scripted implementations are interchangeable.
Related modules:
- console.py: Terminal implementations.
- scripted.py: In-memory implementations used by tests.
- engine.py: Receives a ChoiceCollector and a Display.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Optional, Union

from fair_dice.core.config import GameConfig

EXIT_TOKEN = "X"
HELP_TOKEN = "?"


class Signal(Enum):
    """Non-numeric answers a human can give at any prompt."""
    EXIT = "exit"
    HELP = "help"


Choice = Union[int, Signal]


class Display(ABC):
    """
    Sink for every line shown to the human.
    """

    @abstractmethod
    def show(self, message: str) -> None:
        raise NotImplementedError


class ChoiceCollector(ABC):
    """
    Reads one choice among the offered integers.
    choose() returns an offered integer or Signal.EXIT; help is handled internally and never returned.
    """

    @abstractmethod
    def choose(self, options: Dict[int, str]) -> Choice:
        raise NotImplementedError


def interpret(raw: Optional[str], options: Dict[int, str]) -> Optional[Choice]:
    """
    Map one line of input to a choice.
    Args:
        raw (str|None): The line read, or None at end of input.
        options (dict[int, str]): Offered integers and their labels.
    Returns:
        int | Signal | None: An offered integer, a Signal, or None if the input is not acceptable.
    """
    if raw is None:
        return Signal.EXIT
    text = raw.strip().upper()
    if text == EXIT_TOKEN:
        return Signal.EXIT
    if text == HELP_TOKEN:
        return Signal.HELP
    try:
        value = int(text)
    except ValueError:
        return None
    return value if value in options else None


class LineCollector(ChoiceCollector):
    """
    ChoiceCollector over a line-oriented input, re-prompting until the input is acceptable.
    Subclasses implement read_line(), returning None at end of input.
    Args:
        display (Display): Where the menu, help and error messages go.
        config (GameConfig, optional): Supplies the help text.
    """
    def __init__(self, display: Display, config: GameConfig = None):
        self.display = display
        self.config = config or GameConfig()

    @abstractmethod
    def read_line(self) -> Optional[str]:
        raise NotImplementedError

    def show_menu(self, options: Dict[int, str]) -> None:
        for value, label in options.items():
            self.display.show(f"{value} - {label}")
        self.display.show(f"{EXIT_TOKEN} - exit")
        self.display.show(f"{HELP_TOKEN} - help")

    def choose(self, options: Dict[int, str]) -> Choice:
        self.show_menu(options)
        while True:
            choice = interpret(self.read_line(), options)
            if choice is Signal.EXIT:
                self.display.show("Goodbye.")
                return Signal.EXIT
            if choice is Signal.HELP:
                self.display.show(self.config.help_message)
                continue
            if choice is None:
                offered = ", ".join(str(v) for v in options)
                self.display.show(
                    f"Invalid selection. Enter one of {offered}, {EXIT_TOKEN} to exit, or {HELP_TOKEN} for help."
                )
                continue
            return choice
