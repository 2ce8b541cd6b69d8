from rich.console import Console
from rich.markup import escape
from rich.table import Table
from typing import Iterable
from .colors import Colors

console = Console()
err_console = Console(stderr=True)


def _is_minimal() -> bool:
    return bool(getattr(Colors, 'MINIMAL', False))


def print_info(message: str):
    """Informational output, shown only with Colors.VERBOSE"""
    if not Colors.VERBOSE:
        return
    if _is_minimal():
        console.print(f"[-] {message}", markup=False, highlight=False)
        return
    console.print(f"[{Colors.INFO}]Info:[/{Colors.INFO}] {escape(message)}", highlight=False)


def print_error(message: str):
    if _is_minimal():
        err_console.print(f"[ERROR] {message}", markup=False, highlight=False)
        return
    err_console.print(f"[{Colors.ERROR}]Error:[/{Colors.ERROR}] {escape(message)}", highlight=False)


def print_warning(message: str):
    if _is_minimal():
        err_console.print(f"[WARN] {message}", markup=False, highlight=False)
        return
    err_console.print(f"[{Colors.WARNING}]Warning:[/{Colors.WARNING}] {escape(message)}", highlight=False)


def print_success(message: str):
    if _is_minimal():
        console.print(f"[OK] {message}", markup=False, highlight=False)
        return
    console.print(f"[{Colors.SUCCESS}]Success:[/{Colors.SUCCESS}] {escape(message)}", highlight=False)


def print_result(value):
    """Print a runtime call result without markup interpretation"""
    console.print(repr(value), markup=False, highlight=not _is_minimal())


def print_symbol_table(functions: Iterable, title: str = "Rono runtime symbols"):
    """Render runtime functions as a table (one row per symbol)"""
    if _is_minimal():
        for func in functions:
            console.print(f"{func.symbol} {func.signature()}", markup=False, highlight=False)
        return

    table = Table(title=title, show_lines=False)
    table.add_column("Symbol", style=Colors.SYMBOL, no_wrap=True)
    table.add_column("Builtin")
    table.add_column("Signature", style=Colors.TYPE)
    table.add_column("Category")
    table.add_column("Description")
    for func in functions:
        table.add_row(*(escape(cell) for cell in (func.symbol, func.builtin, func.signature(), func.category, func.description)))
    console.print(table)
