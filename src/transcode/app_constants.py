from __future__ import annotations

import re

DEFAULT_INDENT = 4
MAX_DEPTH = 200

DOCUMENT_SEPARATOR = "---"
# Longest key a YAML scanner accepts before the `:` indicator.
MAX_SIMPLE_KEY_LENGTH = 1024

INPUT_EXT_TO_FORMAT = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}
FORMAT_TO_OUTPUT_EXT = {
    "json": ".json",
    "yaml": ".yaml",
}

STR_TAG = "!!str"
INT_TAG = "!!int"
FLOAT_TAG = "!!float"
BOOL_TAG = "!!bool"
NULL_TAG = "!!null"

YAML_TAG_PREFIX = "tag:yaml.org,2002:"
STRING_LIKE_TAGS = {"!!timestamp", "!!binary"}

TRUE_WORDS = {"true", "True", "TRUE"}
FALSE_WORDS = {"false", "False", "FALSE"}
BOOL_LITERALS = {"true", "false"}
YES_NO_LITERALS = {"yes", "no"}

QUOTE_TRIGGER_CHARS = "\t#\\"

# Code points PyYAML refuses in a stream or folds as line breaks.
YAML_UNSAFE_PATTERN = re.compile(r"[\x7f-\x9f\u2028\u2029\ufeff\ufffe\uffff\ud800-\udfff]")
