import argparse
import sys
from typing import List, Optional

from .schema import SpecVersion
from .version import __version__

__all__ = ["SPEC_VERSIONS", "parse_args"]


SPEC_VERSIONS = {
    "3.13": SpecVersion.V3_13,
    "3.16": SpecVersion.V3_16,
    "3.17": SpecVersion.PROPOSED,
}


def _add_generic_options(parser: argparse.ArgumentParser) -> None:
    misc_group = parser.add_argument_group("generic options")
    misc_group.add_argument(
        "-h", "--help", action="help", help="Show this help message and exit."
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lsp-types",
        description="Inspect Language Server Protocol types and check JSON payloads against them.",
        add_help=False,
    )

    protocol_group = parser.add_argument_group("protocol options")
    protocol_group.add_argument(
        "--spec-version",
        metavar="VERSION",
        choices=SPEC_VERSIONS.keys(),
        default=None,
        help=f"Protocol version to decode as. Possible values: {', '.join(SPEC_VERSIONS.keys())}. [default: 3.17 with --proposed, else 3.16]",
    )
    protocol_group.add_argument(
        "--proposed",
        action="store_true",
        help="Enable the proposed protocol surface (LSP 3.17 and later drafts), like LSP_TYPES_PROPOSED=1.",
    )

    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )

    misc_group = parser.add_argument_group("generic options")
    misc_group.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show program's version number and exit.",
    )
    misc_group.add_argument(
        "-h", "--help", action="help", help="Show this help message and exit."
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    decode_parser = commands.add_parser(
        "decode",
        help="Decode a JSON payload as a protocol type and print its normalized form.",
        add_help=False,
    )
    decode_input_group = decode_parser.add_argument_group("input options")
    decode_input_group.add_argument(
        "type",
        metavar="TYPE",
        help="Name of the protocol type, e.g. InitializeParams.",
    )
    decode_input_group.add_argument(
        "file",
        metavar="FILE",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="JSON file to decode. [default: stdin]",
    )
    decode_output_group = decode_parser.add_argument_group("output options")
    decode_output_group.add_argument(
        "-o",
        "--output",
        type=argparse.FileType("w"),
        default=sys.stdout,
        help="Output file for the normalized JSON. [default: stdout]",
    )
    decode_output_group.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Indentation of the normalized JSON. [default: 2]",
    )
    _add_generic_options(decode_parser)

    types_parser = commands.add_parser(
        "types",
        help="List protocol types with the version that introduced them.",
        add_help=False,
    )
    _add_generic_options(types_parser)

    methods_parser = commands.add_parser(
        "methods",
        help="List request and notification methods.",
        add_help=False,
    )
    _add_generic_options(methods_parser)

    return parser.parse_args(argv)
