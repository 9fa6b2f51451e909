from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Union

import yaml
from yaml.events import (
    AliasEvent,
    CollectionEndEvent,
    DocumentEndEvent,
    MappingStartEvent,
    ScalarEvent,
    SequenceStartEvent,
    StreamEndEvent,
)

from .app_constants import YAML_TAG_PREFIX
from .errors import ParseError
from .resolver import CoreLoader

YAMLSource = Union[bytes, str, IO]


class NodeKind(Enum):
    DOCUMENT = "document"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    ALIAS = "alias"


@dataclass(frozen=True)
class SyntaxNode:
    kind: NodeKind
    tag: str | None = None
    value: str = ""
    children: list[SyntaxNode] = field(default_factory=list)


def short_tag(tag: str) -> str:
    if tag.startswith(YAML_TAG_PREFIX):
        return "!!" + tag[len(YAML_TAG_PREFIX):]
    return tag


def _scalar_tag(loader: CoreLoader, event: ScalarEvent) -> str:
    tag = event.tag
    if tag is None or tag == "!":
        tag = loader.resolve(yaml.ScalarNode, event.value, event.implicit)
    return short_tag(tag)


def _compose_first_document(loader: CoreLoader) -> SyntaxNode:
    document = SyntaxNode(NodeKind.DOCUMENT)
    loader.get_event()
    if loader.check_event(StreamEndEvent):
        return document
    loader.get_event()
    stack = [document]
    while True:
        event = loader.get_event()
        if isinstance(event, DocumentEndEvent):
            return document
        if isinstance(event, CollectionEndEvent):
            stack.pop()
            continue
        parent = stack[-1]
        if isinstance(event, ScalarEvent):
            node = SyntaxNode(NodeKind.SCALAR, tag=_scalar_tag(loader, event), value=event.value)
        elif isinstance(event, AliasEvent):
            node = SyntaxNode(NodeKind.ALIAS, value=event.anchor)
        elif isinstance(event, SequenceStartEvent):
            node = SyntaxNode(NodeKind.SEQUENCE)
            stack.append(node)
        elif isinstance(event, MappingStartEvent):
            node = SyntaxNode(NodeKind.MAPPING)
            stack.append(node)
        else:
            raise ParseError("YAML", f"unexpected event {event!r}")
        parent.children.append(node)


def parse_yaml(source: YAMLSource) -> SyntaxNode:
    """Parse the first YAML document of ``source`` into a syntax tree.

    The tree keeps node kinds, resolved scalar tags (``!!str``, ``!!int``,
    ...) and raw scalar text. Aliases are kept as ``ALIAS`` nodes rather
    than being resolved. An empty stream gives a document with no children.
    """
    try:
        loader = CoreLoader(source)
        try:
            return _compose_first_document(loader)
        finally:
            loader.dispose()
    except yaml.YAMLError as exc:
        raise ParseError("YAML", str(exc)) from exc
