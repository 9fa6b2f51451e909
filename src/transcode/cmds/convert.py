from __future__ import annotations

import argparse

from ..core import (
    TranscodeError,
    infer_source_format,
    json_from_yaml,
    read_source,
    sibling_output_path,
    write_output,
    yaml_from_json,
)


def transcode_bytes(data: bytes, source_format: str, indent: int) -> bytes:
    try:
        if source_format == "yaml":
            out = json_from_yaml(data)
            return out + b"\n" if out else out
        return yaml_from_json(data, indent=indent)
    except TranscodeError as exc:
        raise SystemExit(str(exc)) from exc


def command_to_json(args: argparse.Namespace) -> int:
    write_output(args.output, transcode_bytes(read_source(args.input), "yaml", args.indent))
    return 0


def command_to_yaml(args: argparse.Namespace) -> int:
    write_output(args.output, transcode_bytes(read_source(args.input), "json", args.indent))
    return 0


def command_convert(args: argparse.Namespace) -> int:
    source_format = infer_source_format(args.input)
    target_format = "json" if source_format == "yaml" else "yaml"
    output = args.output
    if args.write:
        if output:
            raise SystemExit("--write cannot be combined with --output")
        output = sibling_output_path(args.input, target_format)
    write_output(output, transcode_bytes(read_source(args.input), source_format, args.indent))
    if args.write:
        print(f"Wrote {target_format} to {output}")
    return 0
