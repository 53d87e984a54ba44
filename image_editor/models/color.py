from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """
    Value object for one pixel: red, green, blue channel values.
    """
    red: int = 0
    green: int = 0
    blue: int = 0

    def as_tuple(self) -> tuple[int, int, int]:
        return self.red, self.green, self.blue

    @classmethod
    def gray(cls, value: int) -> "Color":
        return cls(value, value, value)
