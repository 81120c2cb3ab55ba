"""Formatting of quantities with SI or binary prefixes."""

from __future__ import annotations

from dataclasses import dataclass

_UNITS = ("", "k", "M", "G", "T", "P")


@dataclass(frozen=True)
class PowFormat:
    """A value shown with a unit prefix, e.g. ``1.5kB`` or ``2.0GiB``.

    The format spec may start with ``>`` or ``<`` (align in a fixed width) or
    ``=`` (pad the number column); a trailing width is accepted and ignored.
    """

    val: int
    unit: str
    binary: bool = False

    def _parse_spec(self, spec: str) -> str:
        align = ""
        rest = spec
        if rest and rest[0] in "><=":
            align, rest = rest[0], rest[1:]
        if rest and not rest.isdigit():
            raise ValueError(f"invalid format spec for PowFormat: {spec!r}")
        return align

    def __format__(self, spec: str) -> str:
        align = self._parse_spec(spec)

        base = 1024 if self.binary else 1000
        fraction = float(self.val)
        power = 0
        while power + 1 < len(_UNITS) and fraction / base >= 1:
            fraction /= base
            power += 1

        number_width = 5 + int(self.binary)
        max_width = number_width + 1 + int(self.binary) + len(self.unit)

        if align == ">":
            return str(self).rjust(max_width)
        if align == "<":
            return str(self).ljust(max_width)

        prefix = _UNITS[power] + ("i" if self.binary and power else "")
        if align == "=":
            if power:
                padding = ""
            else:
                padding = "  " if self.binary else " "
            return f"{fraction:<{number_width}.1f}{padding}{prefix}{self.unit}"
        return f"{fraction:.1f}{prefix}{self.unit}"

    def __str__(self) -> str:
        return format(self, "")