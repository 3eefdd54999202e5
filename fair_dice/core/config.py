"""
config.py
Defines the GameConfig dataclass, which centralizes the rule options and numeric constraints of a fair dice game.
Related modules:
- dice.py: Uses min_faces and min_dice_sets to validate dice definitions.
- engine.py: Uses GameConfig for the default opponent index, the modulo exchange and the help text.
- fair_random.py: key_size matches the generator's key length.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """
    Centralizes all rule options for a fair dice game.
    Fields:
        min_dice_sets (int): Dice definitions required to start a game.
        min_faces (int): Faces required on each dice.
        default_opponent_index (int): Dice set the opponent takes when it is free.
        modulo (int): Modulus of the display-only number exchange during each throw.
        key_size (int): HMAC key length in bytes.
        help_message (str): Text shown when the human asks for help.
    """
    min_dice_sets: int = 3
    min_faces: int = 2
    default_opponent_index: int = 0
    modulo: int = 6
    key_size: int = 32
    help_message: str = "Help is not yet implemented."
