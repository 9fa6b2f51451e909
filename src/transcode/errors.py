from __future__ import annotations

from typing import Any


class TranscodeError(Exception):
    pass


class ConfigError(TranscodeError, ValueError):
    pass


class ParseError(TranscodeError):
    def __init__(self, source_format: str, message: str) -> None:
        super().__init__(f"Invalid {source_format}: {message}")
        self.source_format = source_format


class UnsupportedFeature(TranscodeError):
    def __init__(self, feature: str) -> None:
        super().__init__(f"Unsupported feature: {feature}")
        self.feature = feature


class OddMappingChildren(TranscodeError):
    def __init__(self, count: int) -> None:
        super().__init__(f"Mapping node has an odd number of children ({count})")
        self.count = count


class UnsupportedKeyKind(TranscodeError):
    def __init__(self, kind: Any) -> None:
        super().__init__(f"Mapping key must be a scalar, got {kind}")
        self.kind = kind


class UnknownNodeKind(TranscodeError):
    def __init__(self, kind: Any) -> None:
        super().__init__(f"Unknown node kind: {kind!r}")
        self.kind = kind


class UnknownScalarTag(TranscodeError):
    def __init__(self, tag: Any) -> None:
        super().__init__(f"Unknown scalar tag: {tag!r}")
        self.tag = tag


class MaxDepthExceeded(TranscodeError):
    def __init__(self, limit: int) -> None:
        super().__init__(f"Document nesting exceeds the maximum depth of {limit}")
        self.limit = limit
