#!/usr/bin/env python3
import argparse
import logging
from typing import Any, List, Optional

from rich.logging import RichHandler

from . import __version__
from .stdlib.data import RuntimeFunction
from .stdlib.enums import RonoType
from .stdlib.registry import runtime_library
from .utils.colors import Colors
from .utils.errors import ArgumentError, ArityError, RuntimeLibraryError, UnknownSymbolError
from .utils import term

NULL_ARGUMENT = "none"


def configure_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=term.err_console, show_path=False)],
        force=True,
    )


def coerce_argument(func: RuntimeFunction, index: int, text: str) -> Any:
    """Convert one command line string to the parameter's runtime type"""
    param = func.parameters[index]
    if param is RonoType.STR:
        if index in func.nullable_params and text == NULL_ARGUMENT:
            return None
        return text
    try:
        if param is RonoType.INT:
            return int(text)
        if param is RonoType.FLOAT:
            return float(text)
    except ValueError:
        raise ArgumentError(f"argument {index + 1} is not a valid {param.value}: {text!r}", func.symbol)
    lowered = text.lower()
    if lowered in ("true", "1"):
        return True
    if lowered in ("false", "0"):
        return False
    raise ArgumentError(f"argument {index + 1} is not a valid bool: {text!r}", func.symbol)


def cmd_list(args) -> int:
    if args.category:
        functions = runtime_library.get_functions_by_category(args.category)
        if not functions:
            term.print_error(f"No runtime functions in category '{args.category}'")
            return 2
    else:
        functions = list(runtime_library.functions.values())
    term.print_symbol_table(functions)
    return 0


def cmd_docs(args) -> int:
    term.console.print(runtime_library.generate_library_documentation(), markup=False, highlight=False)
    return 0


def cmd_manifest(args) -> int:
    try:
        runtime_library.export_manifest(args.path)
    except OSError as e:
        term.print_error(f"Could not write manifest: {e}")
        return 1
    term.print_success(f"Wrote {len(runtime_library.functions)} symbols to {args.path}")
    return 0


def cmd_call(args) -> int:
    try:
        func = runtime_library.get_function(args.symbol)
        if func is None:
            raise UnknownSymbolError(args.symbol)
        if len(args.args) != func.arity:
            raise ArityError(func.symbol, func.arity, len(args.args))
        coerced = [coerce_argument(func, i, text) for i, text in enumerate(args.args)]
        term.print_info(f"Calling {func.symbol} {func.signature()}")
        result = runtime_library.call(func.symbol, *coerced)
    except RuntimeLibraryError as e:
        term.print_error(str(e))
        return 2
    if func.return_type is not None:
        if result is None and func.nullable:
            term.print_warning(f"{func.symbol} returned no value")
        term.print_result(result)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='rono-runtime', description='Inspect and invoke Rono runtime symbols')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--minimal', action='store_true', help='Plain output without colors or tables')
    sub = parser.add_subparsers(dest='command', required=True)

    p_list = sub.add_parser('list', help='List runtime symbols')
    p_list.add_argument('--category', help='Only symbols in this category (console, random, http)')
    p_list.set_defaults(handler=cmd_list)

    p_docs = sub.add_parser('docs', help='Print the runtime library reference')
    p_docs.set_defaults(handler=cmd_docs)

    p_manifest = sub.add_parser('manifest', help='Write the JSON symbol manifest')
    p_manifest.add_argument('path', help='Output file')
    p_manifest.set_defaults(handler=cmd_manifest)

    p_call = sub.add_parser('call', help='Invoke a runtime symbol')
    p_call.add_argument('symbol', help='Runtime symbol, e.g. rono_rand_int')
    p_call.add_argument('args', nargs='*', help=f"Arguments; '{NULL_ARGUMENT}' passes an absent string")
    p_call.set_defaults(handler=cmd_call)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    Colors.MINIMAL = args.minimal
    Colors.VERBOSE = args.verbose
    configure_logging(args.verbose)

    return args.handler(args)


if __name__ == '__main__':
    raise SystemExit(main())
