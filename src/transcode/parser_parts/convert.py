from __future__ import annotations

from argparse import _SubParsersAction

from ..commands import command_convert, command_to_json, command_to_yaml
from ..core import DEFAULT_INDENT, INPUT_EXT_TO_FORMAT


def _add_indent(parser) -> None:
    parser.add_argument("--indent", type=int, default=DEFAULT_INDENT, help="Spaces per YAML nesting level (default: %(default)s).")


def register_convert_commands(subparsers: _SubParsersAction) -> None:
    p_to_json = subparsers.add_parser("to-json", help="Convert the first YAML document to compact JSON.")
    p_to_json.add_argument("input", nargs="?", help="YAML file to read (defaults to stdin).")
    p_to_json.add_argument("-o", "--output", help="File to write (defaults to stdout).")
    p_to_json.set_defaults(func=command_to_json, indent=DEFAULT_INDENT)

    p_to_yaml = subparsers.add_parser("to-yaml", help="Convert one or more JSON values to YAML documents.")
    p_to_yaml.add_argument("input", nargs="?", help="JSON file to read (defaults to stdin).")
    p_to_yaml.add_argument("-o", "--output", help="File to write (defaults to stdout).")
    _add_indent(p_to_yaml)
    p_to_yaml.set_defaults(func=command_to_yaml)

    extensions = ", ".join(sorted(INPUT_EXT_TO_FORMAT))
    p_convert = subparsers.add_parser("convert", help=f"Convert a file, picking the direction from its extension ({extensions}).")
    p_convert.add_argument("input", help="File to read.")
    p_convert.add_argument("-o", "--output", help="File to write (defaults to stdout).")
    p_convert.add_argument("--write", action="store_true", help="Write next to the input, swapping the extension.")
    _add_indent(p_convert)
    p_convert.set_defaults(func=command_convert)
