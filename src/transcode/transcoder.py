from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import IO, TextIO, Union

from .app_constants import DEFAULT_INDENT
from .buffers import BufferPool
from .errors import ConfigError, ParseError
from .json_encoder import encode_json
from .json_view import iter_documents
from .syntax import parse_yaml
from .yaml_encoder import IndentState, encode_yaml_documents

logger = logging.getLogger(__name__)

Source = Union[bytes, str, IO]


def validate_indent(indent: object) -> int:
    if isinstance(indent, bool) or not isinstance(indent, int) or indent <= 0:
        raise ConfigError(f"Indent width must be a positive integer, got {indent!r}")
    return indent


def _json_text(source: Source) -> str:
    data = source if isinstance(source, (bytes, bytearray, str)) else source.read()
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode(json.detect_encoding(data))
    except UnicodeDecodeError as exc:
        raise ParseError("JSON", str(exc)) from exc


@dataclass
class Transcoder:
    """Streaming converter writing text chunks to ``writer`` as it goes.

    On error the writer may already hold part of the output; treat it as
    unusable.
    """

    writer: TextIO
    indent: int = DEFAULT_INDENT

    def __post_init__(self) -> None:
        validate_indent(self.indent)

    def json_from_yaml(self, source: Source) -> None:
        # Only the first document of a multi-document stream is converted.
        encode_json(parse_yaml(source), self.writer.write)

    def yaml_from_json(self, source: Source) -> int:
        documents = iter_documents(_json_text(source))
        count = encode_yaml_documents(documents, self.writer.write, IndentState.of_width(self.indent))
        if not count:
            raise ParseError("JSON", "no JSON value found")
        logger.debug("Transcoded %d JSON document(s) to YAML", count)
        return count


def json_from_yaml(data: Source, *, pool: BufferPool | None = None) -> bytes:
    if pool is None:
        pool = BufferPool()
    with pool.acquire() as buf:
        Transcoder(buf).json_from_yaml(data)
        return buf.getvalue().encode("utf-8")


def yaml_from_json(data: Source, *, indent: int = DEFAULT_INDENT, pool: BufferPool | None = None) -> bytes:
    if pool is None:
        pool = BufferPool()
    with pool.acquire() as buf:
        Transcoder(buf, indent=indent).yaml_from_json(data)
        return buf.getvalue().encode("utf-8")
