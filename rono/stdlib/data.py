from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional
from .enums import RonoType


@dataclass(frozen=True)
class HttpResponse:
    """Completed HTTP exchange as seen by Rono code"""
    status: int
    body: str = ""
    content_type: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


@dataclass
class RuntimeFunction:
    """One exported runtime symbol and the callable behind it"""
    symbol: str
    description: str
    handler: Callable[..., Any]
    parameters: List[RonoType] = field(default_factory=list)
    return_type: Optional[RonoType] = None
    nullable: bool = False
    nullable_params: List[int] = field(default_factory=list)
    category: str = "utility"
    builtin: str = ""

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def signature(self) -> str:
        params = []
        for index, param in enumerate(self.parameters):
            suffix = "?" if index in self.nullable_params else ""
            params.append(f"{param.value}{suffix}")
        if self.return_type is None:
            returns = "void"
        else:
            returns = self.return_type.value + ("?" if self.nullable else "")
        return f"({', '.join(params)}) -> {returns}"

    def to_dict(self) -> dict:
        return {
            'symbol': self.symbol,
            'builtin': self.builtin,
            'parameters': [p.value for p in self.parameters],
            'nullable_params': list(self.nullable_params),
            'return_type': self.return_type.value if self.return_type else 'void',
            'nullable': self.nullable,
            'category': self.category,
            'description': self.description,
        }
