#!/usr/bin/env python3

import json
import sys
from typing import List, Optional, TextIO

from loguru import logger

from .args import SPEC_VERSIONS, parse_args
from .catalog import find_type, protocol_types
from .converter import decode, default_version, encode
from .errors import LspTypesError, SchemaMismatch
from .features import proposed_enabled, proposed_features
from .notifications import NOTIFICATIONS
from .requests import REQUESTS
from .schema import SpecVersion, introduced_in, is_proposed

__all__ = ["main_cli"]


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    if verbose:
        logger.enable("lsp_types")
        logger.add(sys.stderr, level="DEBUG")
    else:
        logger.disable("lsp_types")
        logger.add(sys.stderr, level="WARNING")


def _version_tag(obj: object) -> str:
    tag = introduced_in(obj) or "-"
    if is_proposed(obj):
        tag += " (proposed)"
    return tag


def _decode(type_name: str, source: TextIO, version: SpecVersion) -> object:
    cls = find_type(type_name)
    try:
        data = json.load(source)
    except json.JSONDecodeError as e:
        raise SchemaMismatch(f"invalid JSON: {e}", target=type_name) from e
    logger.debug("Decoding {} as LSP {}", cls.__name__, version.value)
    return decode(data, cls, version)


def _print_types(output: TextIO) -> None:
    types = protocol_types()
    width = max(len(name) for name in types)
    for name, cls in types.items():
        print(f"{name:<{width}}  {_version_tag(cls)}", file=output)


def _print_methods(output: TextIO) -> None:
    for kind, registry in (("request", REQUESTS), ("notification", NOTIFICATIONS)):
        for method in sorted(registry.values(), key=lambda m: m.method):
            tag = method.since or "-"
            if method.proposed:
                tag += " (proposed)"
            print(f"{kind:<12}  {method.describe()}  [{tag}]", file=output)


def _run(args) -> None:
    if args.command == "decode":
        version = SPEC_VERSIONS[args.spec_version] if args.spec_version else default_version()
        value = _decode(args.type, args.file, version)
        print(json.dumps(encode(value), indent=args.indent), file=args.output)
        args.output.flush()
    elif args.command == "types":
        _print_types(sys.stdout)
    else:
        _print_methods(sys.stdout)


def main_cli(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    _configure_logging(args.verbose)

    try:
        with proposed_features(args.proposed or proposed_enabled()):
            _run(args)
    except SchemaMismatch as e:
        print(e.reason, file=sys.stderr)
        for error in e.errors:
            print(f"  {error}", file=sys.stderr)
        sys.exit(1)
    except LspTypesError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
