"""State of one backlight device."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class BacklightDevice:
    """A backlight with its current and maximum brightness.

    Two devices compare equal when name and brightness values agree; the
    power state is not part of the comparison.
    """

    name: str = ""
    actual: int = 1
    max: int = 1
    powered: bool = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BacklightDevice):
            return NotImplemented
        return (self.name, self.actual, self.max) == (other.name, other.actual, other.max)