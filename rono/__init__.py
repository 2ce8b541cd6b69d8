"""Runtime support library for programs built by the Rono compiler"""
from .stdlib import *  # noqa: F401,F403
from .stdlib import __all__ as _stdlib_all

__version__ = "0.1.0"

__all__ = list(_stdlib_all) + ['__version__']
