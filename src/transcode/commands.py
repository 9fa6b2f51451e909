from __future__ import annotations

from .cmds.convert import command_convert, command_to_json, command_to_yaml

__all__ = [
    "command_convert",
    "command_to_json",
    "command_to_yaml",
]
