from __future__ import annotations

import io
import json

import yaml
from yaml.emitter import Emitter

from .app_constants import (
    BOOL_LITERALS,
    QUOTE_TRIGGER_CHARS,
    YAML_UNSAFE_PATTERN,
    YES_NO_LITERALS,
)
from .resolver import CoreResolver

_DIGITS = "0123456789"

_analyzer = Emitter(io.StringIO(), allow_unicode=True)
_core_resolver = CoreResolver()
_legacy_resolver = yaml.resolver.Resolver()


def is_number(text: str) -> bool:
    """Report whether ``text`` is exactly one JSON number literal.

    Follows the RFC 8259 grammar: an optional ``-``, then ``0`` or a
    non-zero digit run, an optional fraction and an optional exponent.
    Anything left over after the grammar is consumed rejects the literal.
    """
    n = len(text)
    i = 0
    if i < n and text[i] == "-":
        i += 1
    if i >= n:
        return False
    if text[i] == "0":
        i += 1
    elif "1" <= text[i] <= "9":
        i += 1
        while i < n and text[i] in _DIGITS:
            i += 1
    else:
        return False
    if i + 1 < n and text[i] == "." and text[i + 1] in _DIGITS:
        i += 2
        while i < n and text[i] in _DIGITS:
            i += 1
    if i + 1 < n and text[i] in "eE":
        i += 1
        if text[i] in "+-":
            i += 1
        if i >= n or text[i] not in _DIGITS:
            return False
        while i < n and text[i] in _DIGITS:
            i += 1
    return i == n


def is_bool(text: str) -> bool:
    return text in BOOL_LITERALS


def is_yes_no(text: str) -> bool:
    return text in YES_NO_LITERALS


def is_ambiguous(text: str) -> bool:
    return is_number(text) or is_bool(text) or is_yes_no(text)


def quote(text: str) -> str:
    """Double-quoted literal that JSON and YAML both read back as ``text``."""
    literal = json.dumps(text, ensure_ascii=False)
    return YAML_UNSAFE_PATTERN.sub(lambda m: f"\\u{ord(m.group(0)):04x}", literal)


def _resolves_to_string(text: str) -> bool:
    for resolver in (_core_resolver, _legacy_resolver):
        tag = resolver.resolve(yaml.ScalarNode, text, (True, False))
        if tag != yaml.resolver.BaseResolver.DEFAULT_SCALAR_TAG:
            return False
    return True


def needs_quotes(text: str) -> bool:
    if is_ambiguous(text):
        return True
    if any(ch in text for ch in QUOTE_TRIGGER_CHARS):
        return True
    if YAML_UNSAFE_PATTERN.search(text):
        return True
    if not _resolves_to_string(text):
        return True
    return not _analyzer.analyze_scalar(text).allow_block_plain


def fits_block_literal(text: str) -> bool:
    if "\n" not in text or "\r" in text:
        return False
    if YAML_UNSAFE_PATTERN.search(text):
        return False
    first = next((line for line in text.split("\n") if line), "")
    if not first or first[0] == " ":
        return False
    return _analyzer.analyze_scalar(text).allow_block
