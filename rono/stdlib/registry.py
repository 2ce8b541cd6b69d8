#!/usr/bin/env python3

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..utils.errors import ArityError, UnknownSymbolError
from . import console, net, rand
from .data import RuntimeFunction
from .enums import RonoType

INT, FLOAT, BOOL, STR = RonoType.INT, RonoType.FLOAT, RonoType.BOOL, RonoType.STR


class RuntimeLibrary:
    """Symbol table of the functions compiled Rono code links against"""

    def __init__(self):
        self.functions: Dict[str, RuntimeFunction] = {}

        self._register_output_functions()
        self._register_input_functions()
        self._register_random_functions()
        self._register_http_functions()

    def register(self, func: RuntimeFunction):
        self.functions[func.symbol] = func

    def _register_output_functions(self):
        """Register con.out lowerings"""
        self.register(RuntimeFunction(
            symbol="rono_print_int",
            description="Print an integer followed by a newline",
            handler=console.print_int,
            parameters=[INT],
            category="console",
            builtin="con.out",
        ))
        self.register(RuntimeFunction(
            symbol="rono_print_float",
            description="Print a float with six decimals followed by a newline",
            handler=console.print_float,
            parameters=[FLOAT],
            category="console",
            builtin="con.out",
        ))
        self.register(RuntimeFunction(
            symbol="rono_print_bool",
            description="Print true or false followed by a newline",
            handler=console.print_bool,
            parameters=[BOOL],
            category="console",
            builtin="con.out",
        ))
        self.register(RuntimeFunction(
            symbol="rono_print_string",
            description="Print a string followed by a newline, (null) when absent",
            handler=console.print_string,
            parameters=[STR],
            nullable_params=[0],
            category="console",
            builtin="con.out",
        ))
        self.register(RuntimeFunction(
            symbol="rono_print_interpolated",
            description="Print a template with every {} replaced by the integer",
            handler=console.print_interpolated,
            parameters=[STR, INT],
            category="console",
            builtin="con.out",
        ))
        self.register(RuntimeFunction(
            symbol="rono_print_format_int",
            description="Print an integer through an optional {} template",
            handler=console.print_format_int,
            parameters=[STR, INT],
            nullable_params=[0],
            category="console",
            builtin="con.out",
        ))

    def _register_input_functions(self):
        """Register con.in lowerings"""
        self.register(RuntimeFunction(
            symbol="rono_input_string",
            description="Read one line from stdin without its newline, absent at end of input",
            handler=console.input_string,
            return_type=STR,
            nullable=True,
            category="console",
            builtin="con.in",
        ))
        self.register(RuntimeFunction(
            symbol="rono_input_int",
            description="Read one line and parse a leading integer, 0 when invalid",
            handler=console.input_int,
            return_type=INT,
            category="console",
            builtin="con.in",
        ))
        self.register(RuntimeFunction(
            symbol="rono_input_float",
            description="Read one line and parse a leading float, 0.0 when invalid",
            handler=console.input_float,
            return_type=FLOAT,
            category="console",
            builtin="con.in",
        ))
        self.register(RuntimeFunction(
            symbol="rono_input_bool",
            description="Read one line, true only for 'true' or '1'",
            handler=console.input_bool,
            return_type=BOOL,
            category="console",
            builtin="con.in",
        ))

    def _register_random_functions(self):
        """Register randi / randf / rands lowerings"""
        self.register(RuntimeFunction(
            symbol="rono_rand_int",
            description="Random integer in [min, max], bounds in either order",
            handler=rand.rand_int,
            parameters=[INT, INT],
            return_type=INT,
            category="random",
            builtin="randi",
        ))
        self.register(RuntimeFunction(
            symbol="rono_rand_float",
            description="Random float in [min, max), bounds in either order",
            handler=rand.rand_float,
            parameters=[FLOAT, FLOAT],
            return_type=FLOAT,
            category="random",
            builtin="randf",
        ))
        self.register(RuntimeFunction(
            symbol="rono_rand_string",
            description="Random alphanumeric string of the given length",
            handler=rand.rand_string,
            parameters=[INT],
            return_type=STR,
            category="random",
            builtin="rands",
        ))
        self.register(RuntimeFunction(
            symbol="rono_rand_char_range",
            description="Random character between the first characters of two strings",
            handler=rand.rand_char_range,
            parameters=[STR, STR],
            nullable_params=[0, 1],
            return_type=STR,
            category="random",
            builtin="rands",
        ))

    def _register_http_functions(self):
        """Register http.* lowerings"""
        for verb, sends_body, handler in (
            ("get", False, net.http_get),
            ("post", True, net.http_post),
            ("put", True, net.http_put),
            ("delete", False, net.http_delete),
        ):
            self.register(RuntimeFunction(
                symbol=f"rono_http_{verb}",
                description=f"HTTP {verb.upper()}, response body or absent on transport failure",
                handler=handler,
                parameters=[STR, STR] if sends_body else [STR],
                nullable_params=[1] if sends_body else [],
                return_type=STR,
                nullable=True,
                category="http",
                builtin=f"http.{verb}",
            ))

    def get_function(self, symbol: str) -> Optional[RuntimeFunction]:
        """Get a runtime function by symbol"""
        return self.functions.get(symbol)

    def has_function(self, symbol: str) -> bool:
        return symbol in self.functions

    def get_all_functions(self) -> List[str]:
        return list(self.functions.keys())

    def get_functions_by_category(self, category: str) -> List[RuntimeFunction]:
        return [f for f in self.functions.values() if f.category == category]

    def get_functions_for_builtin(self, builtin: str) -> List[RuntimeFunction]:
        """All symbols a source-level builtin may lower to"""
        return [f for f in self.functions.values() if f.builtin == builtin]

    def get_all_categories(self) -> List[str]:
        categories = []
        for func in self.functions.values():
            if func.category not in categories:
                categories.append(func.category)
        return categories

    def call(self, symbol: str, *args: Any) -> Any:
        """Invoke a runtime symbol with positional arguments"""
        func = self.functions.get(symbol)
        if func is None:
            raise UnknownSymbolError(symbol)
        if len(args) != func.arity:
            raise ArityError(symbol, func.arity, len(args))
        return func.handler(*args)

    def generate_library_documentation(self) -> str:
        """Plain-text reference of every symbol, grouped by category"""
        doc = ["RONO RUNTIME LIBRARY", "=" * 80, ""]

        for category in self.get_all_categories():
            heading = f"{category.upper()} FUNCTIONS"
            doc.append(heading)
            doc.append("=" * len(heading))
            doc.append("")

            for func in self.get_functions_by_category(category):
                doc.append(f"Function: {func.symbol}")
                doc.append(f"Builtin: {func.builtin}")
                doc.append(f"Signature: {func.signature()}")
                doc.append(f"Description: {func.description}")
                doc.append("")

        doc.append("=" * 80)
        return "\n".join(doc)

    def export_manifest(self, filename: Union[str, Path]):
        """Write the symbol manifest the compiler declares its imports from"""
        manifest = [func.to_dict() for func in self.functions.values()]
        with open(filename, 'w') as f:
            json.dump(manifest, f, indent=2)


# Global runtime library instance
runtime_library = RuntimeLibrary()
