#!/usr/bin/env python3
from typing import Optional


class RuntimeLibraryError(Exception):
    """Base class for runtime symbol table errors"""

    def __init__(self, message: str, symbol: Optional[str] = None):
        self.message = message
        self.symbol = symbol
        super().__init__(self._format_error())

    def _format_error(self) -> str:
        if self.symbol:
            return f"Error in {self.symbol}: {self.message}"
        return f"Error: {self.message}"


class UnknownSymbolError(RuntimeLibraryError):
    """Requested runtime symbol is not exported"""

    def __init__(self, symbol: str):
        super().__init__("unknown runtime symbol", symbol)


class ArityError(RuntimeLibraryError):
    """Wrong number of arguments for a runtime symbol"""

    def __init__(self, symbol: str, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"expects {expected} argument(s), got {got}", symbol)


class ArgumentError(RuntimeLibraryError):
    """Command line argument could not be coerced to the parameter type"""
    pass
