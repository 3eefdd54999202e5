"""
console.py
Terminal implementations of the Display and ChoiceCollector interfaces.
"""

from typing import Optional

from .base import Display, LineCollector


class ConsoleDisplay(Display):
    def show(self, message: str) -> None:
        print(message)


class ConsoleCollector(LineCollector):
    """
    Reads choices from standard input. End of input counts as exit.
    """
    prompt = "Your selection: "

    def read_line(self) -> Optional[str]:
        try:
            return input(self.prompt)
        except EOFError:
            return None
