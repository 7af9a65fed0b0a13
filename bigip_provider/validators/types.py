from collections.abc import Set
from typing import Any, List, NamedTuple, Protocol, Sequence

from pydantic import BaseModel

FieldValue = str | Sequence[str] | Set[str]


class ValidationResult(NamedTuple):
    warnings: List[str]
    errors: List[str]


class SchemaValidator(Protocol):
    def __call__(self, value: Any, field: str) -> ValidationResult:
        ...


class DeviceUri(BaseModel):
    scheme: str
    host: str
    port: str|None = None
