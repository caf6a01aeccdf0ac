"""Static type and library mapping tables shared by every target."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .context import ValueKind
from . import constants

_GO = constants.TARGET_GO
_PHP = constants.TARGET_PHP
_JS = constants.TARGET_JAVASCRIPT
_CS = constants.TARGET_CSHARP

TYPE_MAPPING: Mapping[ValueKind, Mapping[str, str]] = MappingProxyType(
    {
        ValueKind.INT: MappingProxyType(
            {_GO: "int", _PHP: "int", _JS: "number", _CS: "int"}
        ),
        ValueKind.FLOAT: MappingProxyType(
            {_GO: "float64", _PHP: "float", _JS: "number", _CS: "double"}
        ),
        ValueKind.STRING: MappingProxyType(
            {_GO: "string", _PHP: "string", _JS: "string", _CS: "string"}
        ),
        ValueKind.LIST: MappingProxyType(
            {_GO: "[]interface{}", _PHP: "array", _JS: "Array", _CS: "List<object>"}
        ),
        ValueKind.ARRAY: MappingProxyType(
            {_GO: "[]float64", _PHP: "array", _JS: "number[]", _CS: "double[]"}
        ),
        ValueKind.BOOL: MappingProxyType(
            {_GO: "bool", _PHP: "bool", _JS: "boolean", _CS: "bool"}
        ),
    }
)

LIBRARY_MAPPING: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        constants.LIBRARY_NUMPY: MappingProxyType(
            {
                _GO: "gonum.org/v1/gonum/mat",
                _PHP: "MathPHP\\LinearAlgebra",
                _JS: "ml-matrix",
                _CS: "MathNet.Numerics",
            }
        ),
        constants.LIBRARY_SKLEARN: MappingProxyType(
            {
                _GO: "github.com/sajari/regression",
                _PHP: "Phpml\\Preprocessing",
                _JS: "ml-js/ml",
                _CS: "ML.NET",
            }
        ),
    }
)


def type_for(kind: ValueKind, target: str) -> str:
    """Return *target*'s type name for *kind*.

    ``unknown`` and any unmapped combination fall back to the target's
    numeric-array type, the most useful default for the snippets this tool
    is aimed at.
    """
    row = TYPE_MAPPING.get(kind) or TYPE_MAPPING[ValueKind.ARRAY]
    return row.get(target) or TYPE_MAPPING[ValueKind.ARRAY].get(target, "")


def library_equivalent(library: str, target: str) -> str:
    """Look up *target*'s equivalent for a source library name."""
    return LIBRARY_MAPPING.get(library, {}).get(target, constants.NOT_AVAILABLE)
