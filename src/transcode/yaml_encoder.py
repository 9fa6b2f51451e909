from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable

from .app_constants import (
    DEFAULT_INDENT,
    DOCUMENT_SEPARATOR,
    MAX_DEPTH,
    MAX_SIMPLE_KEY_LENGTH,
    QUOTE_TRIGGER_CHARS,
)
from .errors import MaxDepthExceeded
from .json_view import JsonType, JsonView
from .scalars import fits_block_literal, needs_quotes, quote

Write = Callable[[str], Any]


@dataclass(frozen=True)
class IndentState:
    depth: int = 0
    unit: str = " " * DEFAULT_INDENT

    @classmethod
    def of_width(cls, width: int) -> IndentState:
        return cls(unit=" " * width)

    @property
    def prefix(self) -> str:
        return self.unit * self.depth

    def deeper(self) -> IndentState:
        return replace(self, depth=self.depth + 1)


def encode_yaml(view: JsonView, write: Write, state: IndentState = IndentState()) -> None:
    """Write the JSON value behind ``view`` as block-style YAML.

    Entries of a container at ``state.depth`` are indented by that many
    units; the first entry of the top-level container starts the output
    without a line break. Numbers are copied from their source literal.
    """
    if state.depth > MAX_DEPTH:
        raise MaxDepthExceeded(MAX_DEPTH)
    kind = view.type
    if kind is JsonType.NUMBER:
        write(view.raw)
    elif kind is JsonType.STRING:
        _write_string(view.string(), write, state)
    elif kind is JsonType.ARRAY:
        _write_array(view, write, state)
    elif kind is JsonType.OBJECT:
        _write_object(view, write, state)
    else:
        write(kind.value)


def encode_yaml_documents(views: Iterable[JsonView], write: Write, state: IndentState = IndentState()) -> int:
    count = 0
    for view in views:
        if count:
            write(DOCUMENT_SEPARATOR + "\n")
        encode_yaml(view, write, state)
        write("\n")
        count += 1
    return count


def _start_entry(write: Write, state: IndentState, index: int) -> None:
    if index > 0 or state.depth > 0:
        write("\n")
        write(state.prefix)


def _write_entry_value(view: JsonView, write: Write, state: IndentState) -> None:
    if view.type in (JsonType.ARRAY, JsonType.OBJECT) and not view.is_empty():
        encode_yaml(view, write, state)
        return
    write(" ")
    encode_yaml(view, write, state)


def _write_array(view: JsonView, write: Write, state: IndentState) -> None:
    if view.is_empty():
        write("[]")
        return
    for i, item in enumerate(view.values()):
        _start_entry(write, state, i)
        write("-")
        _write_entry_value(item, write, state.deeper())


def _write_object(view: JsonView, write: Write, state: IndentState) -> None:
    if view.is_empty():
        write("{}")
        return
    for i, (key, value) in enumerate(view.items()):
        _start_entry(write, state, i)
        _write_key(key, write, state)
        write(":")
        _write_entry_value(value, write, state.deeper())


def _write_key(key: str, write: Write, state: IndentState) -> None:
    rendered = quote(key) if needs_quotes(key) else key
    if len(rendered) > MAX_SIMPLE_KEY_LENGTH:
        # Explicit key: `? key` line, then `:` at the same indentation.
        write("? " + quote(key))
        write("\n" + state.prefix)
        return
    write(rendered)


def _write_string(text: str, write: Write, state: IndentState) -> None:
    if "\n" in text and not any(ch in text for ch in QUOTE_TRIGGER_CHARS) and fits_block_literal(text):
        _write_block(text, write, state)
    elif needs_quotes(text):
        write(quote(text))
    else:
        write(text)


def _write_block(text: str, write: Write, state: IndentState) -> None:
    # Chomping indicator carries the trailing newline count: none, one, several.
    if not text.endswith("\n"):
        write("|-")
        body = text
    else:
        write("|+" if text.endswith("\n\n") else "|")
        body = text[:-1]
    prefix = state.unit * max(state.depth, 1)
    for line in body.split("\n"):
        write("\n")
        if line:
            write(prefix + line)
