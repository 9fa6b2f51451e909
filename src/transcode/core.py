from __future__ import annotations

from .app_constants import DEFAULT_INDENT, INPUT_EXT_TO_FORMAT
from .errors import TranscodeError
from .mapping_io import infer_source_format, read_source, sibling_output_path, write_output
from .transcoder import json_from_yaml, yaml_from_json
