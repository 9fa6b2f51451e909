from __future__ import annotations

import sys
from pathlib import Path

from .app_constants import FORMAT_TO_OUTPUT_EXT, INPUT_EXT_TO_FORMAT


def infer_source_format(path: str) -> str:
    ext = Path(path).suffix.lower()
    if ext not in INPUT_EXT_TO_FORMAT:
        choices = ", ".join(sorted(INPUT_EXT_TO_FORMAT))
        raise SystemExit(f"Unsupported input extension: `{ext or path}`. Use one of: {choices}")
    return INPUT_EXT_TO_FORMAT[ext]


def read_source(path: str | None) -> bytes:
    if path is None or path == "-":
        return sys.stdin.buffer.read()
    try:
        return Path(path).expanduser().read_bytes()
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc}") from exc


def write_output(path: str | None, data: bytes) -> None:
    if path is None or path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    try:
        Path(path).expanduser().write_bytes(data)
    except OSError as exc:
        raise SystemExit(f"Cannot write {path}: {exc}") from exc


def sibling_output_path(path: str, target_format: str) -> str:
    return str(Path(path).with_suffix(FORMAT_TO_OUTPUT_EXT[target_format]))
