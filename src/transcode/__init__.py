from __future__ import annotations

from .buffers import BufferPool
from .errors import (
    ConfigError,
    MaxDepthExceeded,
    OddMappingChildren,
    ParseError,
    TranscodeError,
    UnknownNodeKind,
    UnknownScalarTag,
    UnsupportedFeature,
    UnsupportedKeyKind,
)
from .json_encoder import encode_json
from .json_view import JsonType, JsonView, iter_documents
from .resolver import CoreLoader, CoreResolver
from .scalars import is_bool, is_number, is_yes_no
from .syntax import NodeKind, SyntaxNode, parse_yaml
from .transcoder import Transcoder, json_from_yaml, yaml_from_json
from .yaml_encoder import IndentState, encode_yaml, encode_yaml_documents

__version__ = "0.1.0"

__all__ = [
    "BufferPool",
    "ConfigError",
    "CoreLoader",
    "CoreResolver",
    "IndentState",
    "JsonType",
    "JsonView",
    "MaxDepthExceeded",
    "NodeKind",
    "OddMappingChildren",
    "ParseError",
    "SyntaxNode",
    "TranscodeError",
    "Transcoder",
    "UnknownNodeKind",
    "UnknownScalarTag",
    "UnsupportedFeature",
    "UnsupportedKeyKind",
    "encode_json",
    "encode_yaml",
    "encode_yaml_documents",
    "is_bool",
    "is_number",
    "is_yes_no",
    "iter_documents",
    "json_from_yaml",
    "parse_yaml",
    "yaml_from_json",
]
