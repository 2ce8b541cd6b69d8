from enum import Enum


class RonoType(Enum):
    """Primitive value types crossing the runtime boundary"""
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STR = "str"


class HttpMethod(Enum):
    """HTTP verbs the runtime issues"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def sends_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT)
