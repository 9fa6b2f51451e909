from __future__ import annotations

import argparse

from .parser_parts.convert import register_convert_commands


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transcode",
        description="Convert between JSON and YAML without losing literal formatting.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")

    subparsers = parser.add_subparsers(dest="command", required=True)
    register_convert_commands(subparsers)
    return parser
