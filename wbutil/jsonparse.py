"""Lenient JSON parsing for module output and configuration text."""

from __future__ import annotations

import json
from typing import Any


class JsonParseError(ValueError):
    """Raised when text cannot be parsed as JSON."""


def _reject_constant(name: str) -> Any:
    raise JsonParseError(f"special float value not allowed: {name}")


def _strip_comments(text: str) -> str:
    out: list[str] = []
    i = 0
    n = len(text)
    in_string = False
    while i < n:
        ch = text[i]
        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue
        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
        elif text.startswith("//", i):
            end = text.find("\n", i)
            if end == -1:
                break
            out.append(" ")
            i = end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end == -1:
                raise JsonParseError("unterminated comment")
            out.append(" ")
            i = end + 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _drop_trailing_commas(text: str) -> str:
    out: list[str] = []
    i = 0
    n = len(text)
    in_string = False
    while i < n:
        ch = text[i]
        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue
        if ch == '"':
            in_string = True
        elif ch == ",":
            j = i + 1
            while j < n and text[j] in " \t\r\n":
                j += 1
            if j < n and text[j] in "}]":
                i += 1
                continue
        out.append(ch)
        i += 1
    return "".join(out)


class JsonParser:
    """Parses JSON text, accepting comments and trailing commas.

    Empty input yields an empty object; content after the first value is ignored.
    """

    def __init__(self) -> None:
        self._decoder = json.JSONDecoder(parse_constant=_reject_constant)

    def parse(self, data: str) -> Any:
        if not data:
            return {}
        text = data.lstrip("\ufeff")
        cleaned = _drop_trailing_commas(_strip_comments(text))
        start = len(cleaned) - len(cleaned.lstrip(" \t\r\n"))
        try:
            value, _ = self._decoder.raw_decode(cleaned, start)
        except json.JSONDecodeError as exc:
            raise JsonParseError(str(exc)) from exc
        return value