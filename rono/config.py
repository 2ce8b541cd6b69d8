#!/usr/bin/env python3
"""Fixed runtime policies shared by the Rono runtime modules"""

# HTTP client
HTTP_TIMEOUT = 30.0          # seconds, whole request including body
USER_AGENT = "Rono-HTTP/1.0"
HTTP_CHUNK_SIZE = 16 * 1024
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Console
INPUT_BUFFER_SIZE = 1024     # characters per line read, terminator slot included
NULL_TEXT = "(null)"
INTERPOLATION_MARKER = "{}"
FLOAT_FORMAT = "{:.6f}"

# Random
ALPHANUMERIC = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
FALLBACK_CHAR = "a"
RANDOM_DRAW_BITS = 64

# 64-bit signed integer bounds
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
