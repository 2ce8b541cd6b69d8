#!/usr/bin/env python3
class Colors:
    """Terminal output switches and rich styles"""
    # Plain bracketed output when set (e.g. for logs and pipes)
    MINIMAL = False
    VERBOSE = False

    ERROR = "red"
    WARNING = "#9b59b6"
    INFO = "yellow"
    SUCCESS = "green"
    SYMBOL = "cyan"
    TYPE = "magenta"
