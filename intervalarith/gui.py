"""State and callbacks of the number-input form."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class DataKind(enum.IntEnum):
    """Kind of numbers the form accepts."""

    REAL = 0
    POINT_INTERVAL = 1
    REAL_INTERVAL = 2


@dataclass
class InputForm:
    """Labels, selected data kind and result text of the input form."""

    choice: DataKind = DataKind.REAL
    first_label: str = "Value A:"
    second_label: str = "Value B:"
    result: str = ""

    def on_choice_change(self, choice: int) -> None:
        """Switch the data kind and relabel the inputs."""
        self.choice = DataKind(choice)
        self.first_label = "Value A:" if self.choice is DataKind.REAL else "Value X:"
        self.second_label = (
            "Value B:" if self.choice is DataKind.POINT_INTERVAL else "Value Y:"
        )

    def on_calculate(self, a: str, b: str) -> str:
        """Record and return the text describing the entered values."""
        self.result = f"You entered: {a}, {b} for choice {int(self.choice)}"
        return self.result