"""Analysis data model — value kinds and the immutable analysis Context."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator


class ValueKind(str, Enum):
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    LIST = "list"
    ARRAY = "array"
    BOOL = "bool"
    UNKNOWN = "unknown"


class Context(BaseModel):
    """Result of one analysis pass over a source snippet.

    ``functions`` and ``detected_libraries`` behave as sets (no duplicates)
    but keep discovery order so that reports render deterministically.
    The mapping fields are read-only views.
    """

    model_config = ConfigDict(frozen=True, validate_default=True)

    variables: Mapping[str, ValueKind] = {}
    functions: tuple[str, ...] = ()
    detected_libraries: tuple[str, ...] = ()
    data_structure_hints: Mapping[str, ValueKind] = {}
    has_basic_operations: bool = False

    @field_validator("variables", "data_structure_hints", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, ValueKind]) -> Mapping[str, ValueKind]:
        return MappingProxyType(dict(value))

    @field_serializer("variables", "data_structure_hints")
    def _as_dict(self, value: Mapping[str, ValueKind]) -> dict[str, ValueKind]:
        return dict(value)

    def kind_of(self, name: str) -> ValueKind:
        return self.variables.get(name, ValueKind.UNKNOWN)

    def uses_library(self, library: str) -> bool:
        return library in self.detected_libraries


EMPTY_CONTEXT = Context()
