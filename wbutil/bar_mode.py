"""Bar layer, margins and display mode settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BarLayer(Enum):
    """Stacking layer a bar surface is placed on."""

    BOTTOM = "bottom"
    TOP = "top"
    OVERLAY = "overlay"

    @classmethod
    def from_name(cls, name: str) -> "BarLayer":
        """Look up a layer by its config name; raises ``ValueError`` if unknown."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"unknown bar layer: {name!r}") from None


@dataclass(frozen=True)
class BarMargins:
    """Space around the bar, in pixels."""

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @classmethod
    def from_values(cls, *args: int) -> "BarMargins":
        """Build margins from one to four values, in CSS shorthand order.

        One value sets all sides; two set vertical then horizontal; three set
        top, horizontal, bottom; four set top, right, bottom, left.
        """
        values = [int(v) for v in args]
        if len(values) == 1:
            (v,) = values
            return cls(v, v, v, v)
        if len(values) == 2:
            vertical, horizontal = values
            return cls(vertical, horizontal, vertical, horizontal)
        if len(values) == 3:
            top, horizontal, bottom = values
            return cls(top, horizontal, bottom, horizontal)
        if len(values) == 4:
            return cls(*values)
        raise ValueError(f"margins take 1 to 4 values, got {len(values)}")


@dataclass(frozen=True)
class BarMode:
    """How a bar is shown: its layer, whether it reserves space, takes input and is visible."""

    layer: BarLayer
    exclusive: bool
    passthrough: bool
    visible: bool