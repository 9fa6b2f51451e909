from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import Enum
from json.decoder import WHITESPACE, scanstring
from json.scanner import NUMBER_RE
from typing import Iterator

from .app_constants import MAX_DEPTH
from .errors import MaxDepthExceeded, ParseError

_STRUCTURE = re.compile(r'["\[\]{}]')


class JsonType(Enum):
    NULL = "null"
    FALSE = "false"
    TRUE = "true"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


_TYPE_BY_FIRST_CHAR = {
    "n": JsonType.NULL,
    "f": JsonType.FALSE,
    "t": JsonType.TRUE,
    '"': JsonType.STRING,
    "[": JsonType.ARRAY,
    "{": JsonType.OBJECT,
}


def _skip_ws(text: str, pos: int) -> int:
    return WHITESPACE.match(text, pos).end()


def _value_end(text: str, start: int) -> int:
    ch = text[start]
    if ch == '"':
        return scanstring(text, start + 1)[1]
    if ch == "t" or ch == "n":
        return start + 4
    if ch == "f":
        return start + 5
    if ch not in "[{":
        return NUMBER_RE.match(text, start).end()
    depth = 0
    pos = start
    while True:
        match = _STRUCTURE.search(text, pos)
        token = match.group(0)
        if token == '"':
            pos = scanstring(text, match.end())[1]
            continue
        pos = match.end()
        depth += 1 if token in "[{" else -1
        if depth == 0:
            return pos


@dataclass(frozen=True)
class JsonView:
    """Read-only window onto one value inside validated JSON text.

    Nothing is decoded up front: the type comes from the first character,
    numbers keep their exact source literal through ``raw`` and members are
    located by scanning the text on every iteration, in source order.
    """

    text: str
    start: int
    end: int

    @property
    def type(self) -> JsonType:
        return _TYPE_BY_FIRST_CHAR.get(self.text[self.start], JsonType.NUMBER)

    @property
    def raw(self) -> str:
        return self.text[self.start:self.end]

    def string(self) -> str:
        if self.type is not JsonType.STRING:
            raise TypeError(f"JSON {self.type.value} is not a string")
        return scanstring(self.text, self.start + 1)[0]

    def is_empty(self) -> bool:
        return self.text[_skip_ws(self.text, self.start + 1)] in "]}"

    def items(self) -> Iterator[tuple[str, JsonView]]:
        if self.type is not JsonType.OBJECT:
            raise TypeError(f"JSON {self.type.value} is not an object")
        for key, value in self._members(keyed=True):
            yield key, value

    def values(self) -> Iterator[JsonView]:
        if self.type is not JsonType.ARRAY:
            raise TypeError(f"JSON {self.type.value} is not an array")
        for _, value in self._members(keyed=False):
            yield value

    def _members(self, keyed: bool) -> Iterator[tuple[str | None, JsonView]]:
        text = self.text
        if self.is_empty():
            return
        pos = _skip_ws(text, self.start + 1)
        while True:
            key = None
            if keyed:
                key, pos = scanstring(text, pos + 1)
                pos = _skip_ws(text, _skip_ws(text, pos) + 1)
            end = _value_end(text, pos)
            yield key, JsonView(text, pos, end)
            pos = _skip_ws(text, end)
            if text[pos] != ",":
                return
            pos = _skip_ws(text, pos + 1)


def _reject_constant(name: str) -> None:
    raise ParseError("JSON", f"{name} is not a valid JSON value")


_decoder = json.JSONDecoder(parse_constant=_reject_constant)


def iter_documents(text: str) -> Iterator[JsonView]:
    """Yield a view per top-level value of concatenated JSON ``text``.

    Each value is validated with the standard decoder before its view is
    handed out; whitespace between values is ignored.
    """
    pos = _skip_ws(text, 0)
    while pos < len(text):
        try:
            _, end = _decoder.raw_decode(text, pos)
        except json.JSONDecodeError as exc:
            raise ParseError("JSON", str(exc)) from exc
        except RecursionError as exc:
            raise MaxDepthExceeded(MAX_DEPTH) from exc
        yield JsonView(text, pos, end)
        pos = _skip_ws(text, end)
