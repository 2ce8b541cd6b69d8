"""Rono standard runtime - re-exports for convenience"""
from .enums import RonoType, HttpMethod
from .data import HttpResponse, RuntimeFunction
from .console import (
    print_int, print_float, print_bool, print_string, print_interpolated, print_format_int,
    format_interpolated, input_string, input_int, input_float, input_bool,
)
from .rand import rand_int, rand_float, rand_string, rand_char_range
from .net import send_request, http_get, http_post, http_put, http_delete
from .registry import RuntimeLibrary, runtime_library

__all__ = [
    'RonoType', 'HttpMethod', 'HttpResponse', 'RuntimeFunction',
    'print_int', 'print_float', 'print_bool', 'print_string', 'print_interpolated', 'print_format_int',
    'format_interpolated', 'input_string', 'input_int', 'input_float', 'input_bool',
    'rand_int', 'rand_float', 'rand_string', 'rand_char_range',
    'send_request', 'http_get', 'http_post', 'http_put', 'http_delete',
    'RuntimeLibrary', 'runtime_library',
]
