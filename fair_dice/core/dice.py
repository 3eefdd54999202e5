"""
dice.py
Defines the DiceSet model and the validator that turns textual dice definitions into dice sets.
Validation outcomes are returned as DiceValidation values; parse_dice_sets is the fatal startup path
that raises the first error found.
Related modules:
- errors.py: MalformedDiceSpec, TooFewFaces and TooFewDiceSets.
- config.py: min_faces and min_dice_sets.
- engine.py: Consumes the parsed dice sets.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .config import GameConfig
from .errors import DiceSpecError, MalformedDiceSpec, TooFewFaces, TooFewDiceSets

FACE_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


@dataclass(frozen=True)
class DiceSet:
    """
    An immutable, ordered sequence of face values. Faces may repeat and need not be sequential.
    Args:
        faces (tuple[int, ...]): Face values in throw-index order.
    """
    faces: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.faces)

    def __getitem__(self, index: int) -> int:
        return self.faces[index]

    def __iter__(self):
        return iter(self.faces)

    def __str__(self) -> str:
        return ",".join(str(f) for f in self.faces)

    def mean(self) -> float:
        return sum(self.faces) / len(self.faces)


@dataclass(frozen=True)
class DiceValidation:
    """
    Outcome of validating one textual dice definition: exactly one of dice or error is set.
    Fields:
        spec (str): The definition as supplied.
        dice (DiceSet|None): Parsed dice on success.
        error (DiceSpecError|None): Named failure otherwise.
    """
    spec: str
    dice: Optional[DiceSet] = None
    error: Optional[DiceSpecError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def validate_dice(spec: str, min_faces: int = 2) -> DiceValidation:
    """
    Validate a comma-separated list of integers such as "2,2,4,4,9,9".
    Args:
        spec (str): Textual dice definition.
        min_faces (int): Minimum number of faces.
    Returns:
        DiceValidation: The parsed DiceSet, or a MalformedDiceSpec / TooFewFaces error.
    """
    parts = spec.split(",")
    # ASCII decimal only: int() would also take "1_0" and non-ASCII digits
    if not all(FACE_PATTERN.fullmatch(part) for part in parts):
        return DiceValidation(spec=spec, error=MalformedDiceSpec(spec))
    faces = tuple(int(part) for part in parts)
    if len(faces) < min_faces:
        return DiceValidation(spec=spec, error=TooFewFaces(spec, min_faces))
    return DiceValidation(spec=spec, dice=DiceSet(faces))


def parse_dice_sets(specs: Iterable[str], config: GameConfig = None) -> List[DiceSet]:
    """
    Parse every dice definition supplied at startup.
    Args:
        specs (iterable[str]): Textual dice definitions, one per program argument.
        config (GameConfig, optional): Rule constraints. Defaults to GameConfig().
    Returns:
        list[DiceSet]: Parsed dice sets in argument order.
    Raises:
        TooFewDiceSets: If fewer than config.min_dice_sets definitions are given.
        DiceSpecError: The first invalid definition's error.
    """
    config = config or GameConfig()
    specs = list(specs)
    # checked before any definition is parsed
    if len(specs) < config.min_dice_sets:
        raise TooFewDiceSets(len(specs), config.min_dice_sets)
    dice_sets = []
    for spec in specs:
        result = validate_dice(spec, config.min_faces)
        if not result.ok:
            raise result.error
        dice_sets.append(result.dice)
    return dice_sets
