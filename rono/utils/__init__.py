"""Shared helpers for the Rono runtime: once guards, terminal output, errors"""
from .once import Once
from .errors import RuntimeLibraryError, UnknownSymbolError, ArityError, ArgumentError

__all__ = ['Once', 'RuntimeLibraryError', 'UnknownSymbolError', 'ArityError', 'ArgumentError']
