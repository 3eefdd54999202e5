"""
errors.py
Exception hierarchy for the fair dice game.
Startup errors (dice definitions) and fatal generator errors share the FairDiceError base
so the CLI can report them uniformly.
Related modules:
- dice.py: Produces DiceSpecError subclasses when validating dice definitions.
- fair_random.py: Raises InvalidRange and EntropySourceUnavailable.
- engine.py: Lets generator errors propagate; a user abort is a state, not an error.
"""


class FairDiceError(Exception):
    """
    Base class for all fair dice errors.
    """
    pass


class DiceSpecError(FairDiceError):
    """
    Base class for startup errors caused by the dice definitions.
    Args:
        spec (str|None): The offending textual definition, if a single one is at fault.
        message (str): Human readable reason.
    """
    def __init__(self, message: str, spec: str = None):
        super().__init__(message)
        self.spec = spec


class MalformedDiceSpec(DiceSpecError):
    """
    Raised (or returned) when a dice definition is not a comma-separated list of integers.
    """
    def __init__(self, spec: str):
        super().__init__(
            f"Invalid dice configuration: \"{spec}\". Use a comma-separated list of integers.",
            spec=spec,
        )


class TooFewDiceSets(DiceSpecError):
    """
    Raised when fewer dice definitions than required are supplied to start a game.
    """
    def __init__(self, count: int, min_dice_sets: int = 3):
        super().__init__(
            f"At least {min_dice_sets} dice configurations must be specified, got {count}."
        )
        self.count = count
        self.min_dice_sets = min_dice_sets


class TooFewFaces(TooFewDiceSets):
    """
    Raised (or returned) when a dice definition has fewer faces than the configured minimum.
    A TooFewDiceSets error: a definition like "5" does not yield a usable dice.
    count is the number of faces found and min_faces the number required; min_dice_sets is None.
    """
    def __init__(self, spec: str, min_faces: int = 2):
        DiceSpecError.__init__(
            self,
            f"Each dice must have at least {min_faces} sides: \"{spec}\".",
            spec=spec,
        )
        self.count = len(spec.split(","))
        self.min_dice_sets = None
        self.min_faces = min_faces


class InvalidRange(FairDiceError, ValueError):
    """
    Raised when the fair random generator is asked for an empty or unsupported range.
    """
    pass


class EntropySourceUnavailable(FairDiceError):
    """
    Raised when the cryptographically secure random source cannot supply bytes.
    There is no retry and no fallback to a non-cryptographic source.
    """
    pass


class UnknownAgentError(FairDiceError, ValueError):
    """
    Raised when an opponent agent name is not registered.
    """
    pass


class IllegalMoveError(FairDiceError):
    """
    Raised when the game is driven out of order or an agent picks a dice set that is not available.
    """
    pass
