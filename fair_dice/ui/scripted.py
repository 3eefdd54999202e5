"""
scripted.py
In-memory Display and ChoiceCollector implementations. Used by tests and for replaying a fixed input script.
Related modules:
- base.py: Interfaces implemented here.
"""

from typing import Iterable, List, Optional

from fair_dice.core.config import GameConfig
from .base import Display, LineCollector


class RecordingDisplay(Display):
    """
    Records every shown line in order.
    """
    def __init__(self):
        self.lines: List[str] = []

    def show(self, message: str) -> None:
        self.lines.extend(str(message).split("\n"))

    def text(self) -> str:
        return "\n".join(self.lines)


class ScriptedCollector(LineCollector):
    """
    Answers prompts from a fixed list of raw input lines; running out of lines counts as end of input.
    Args:
        lines (iterable[str]): Raw answers, e.g. ["1", "?", "2", "X"].
        display (Display): Where menus and messages go.
    """
    def __init__(self, lines: Iterable[str], display: Display, config: GameConfig = None):
        super().__init__(display, config)
        self._lines = list(lines)
        self.reads = 0

    def read_line(self) -> Optional[str]:
        if not self._lines:
            return None
        self.reads += 1
        line = self._lines.pop(0)
        self.display.show(f"> {line}")
        return line

    @property
    def remaining(self) -> List[str]:
        return list(self._lines)
