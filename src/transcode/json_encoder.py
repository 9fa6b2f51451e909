from __future__ import annotations

import logging
from typing import Any, Callable

from .app_constants import (
    BOOL_TAG,
    FALSE_WORDS,
    FLOAT_TAG,
    INT_TAG,
    MAX_DEPTH,
    NULL_TAG,
    STR_TAG,
    STRING_LIKE_TAGS,
    TRUE_WORDS,
)
from .errors import (
    MaxDepthExceeded,
    OddMappingChildren,
    UnknownNodeKind,
    UnknownScalarTag,
    UnsupportedFeature,
    UnsupportedKeyKind,
)
from .scalars import is_number, quote
from .syntax import NodeKind, SyntaxNode

logger = logging.getLogger(__name__)

Write = Callable[[str], Any]


def encode_json(node: SyntaxNode, write: Write, depth: int = 0) -> None:
    """Write ``node`` as compact JSON through ``write``.

    Numeric literals that satisfy the JSON grammar are copied verbatim, so
    ``1.50`` stays ``1.50``. Aliases, malformed mappings and non-scalar
    keys raise; output already written is then unusable.
    """
    if depth > MAX_DEPTH:
        raise MaxDepthExceeded(MAX_DEPTH)
    kind = node.kind
    if kind is NodeKind.DOCUMENT:
        if node.children:
            encode_json(node.children[0], write, depth)
    elif kind is NodeKind.SCALAR:
        write(_scalar(node))
    elif kind is NodeKind.SEQUENCE:
        _encode_sequence(node, write, depth)
    elif kind is NodeKind.MAPPING:
        _encode_mapping(node, write, depth)
    elif kind is NodeKind.ALIAS:
        raise UnsupportedFeature("alias")
    else:
        raise UnknownNodeKind(kind)


def _encode_mapping(node: SyntaxNode, write: Write, depth: int) -> None:
    children = node.children
    if len(children) % 2 != 0:
        raise OddMappingChildren(len(children))
    write("{")
    for i in range(0, len(children), 2):
        if i > 0:
            write(",")
        write(_key(children[i]))
        write(":")
        encode_json(children[i + 1], write, depth + 1)
    write("}")


def _encode_sequence(node: SyntaxNode, write: Write, depth: int) -> None:
    write("[")
    for i, child in enumerate(node.children):
        if i > 0:
            write(",")
        encode_json(child, write, depth + 1)
    write("]")


def _key(node: SyntaxNode) -> str:
    if node.kind is not NodeKind.SCALAR:
        raise UnsupportedKeyKind(node.kind)
    return quote(node.value)


def _scalar(node: SyntaxNode) -> str:
    tag = node.tag
    value = node.value
    if tag == STR_TAG or tag in STRING_LIKE_TAGS:
        return quote(value)
    if tag == INT_TAG or tag == FLOAT_TAG:
        if is_number(value):
            return value
        return _lenient(tag, value)
    if tag == BOOL_TAG:
        if value in TRUE_WORDS:
            return "true"
        if value in FALSE_WORDS:
            return "false"
        return _lenient(tag, value)
    if tag == NULL_TAG:
        return "null"
    raise UnknownScalarTag(tag)


def _lenient(tag: str, value: str) -> str:
    logger.warning("%s scalar %r is not a JSON literal; writing it as a string", tag, value)
    return quote(value)
