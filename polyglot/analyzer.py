"""Shallow static analysis of a source snippet — recovers a Context."""

from __future__ import annotations

import logging

from .context import Context, ValueKind
from .patterns import SourcePatterns
from . import constants

logger = logging.getLogger(__name__)


def infer_kind(expression: str) -> ValueKind:
    """Classify the right-hand side of an assignment.

    The checks run in a fixed priority order and the first match wins; this
    is a cheap heuristic, not type analysis.
    """
    stripped = expression.strip()
    if "[]" in expression:
        return ValueKind.LIST
    if constants.NUMPY_ARRAY_IDIOM in expression:
        return ValueKind.ARRAY
    if SourcePatterns.INT_LITERAL.match(stripped):
        return ValueKind.INT
    if SourcePatterns.FLOAT_LITERAL.match(stripped):
        return ValueKind.FLOAT
    if '"' in expression or "'" in expression:
        return ValueKind.STRING
    if SourcePatterns.BOOL_LITERAL.search(expression):
        return ValueKind.BOOL
    return ValueKind.UNKNOWN


class ContextAnalyzer:
    """Scans source text once and builds an immutable Context.

    The accumulators below are reset at the start of every ``analyze`` call,
    so one analyzer instance can be reused without state leaking between
    snippets.
    """

    def __init__(self):
        self._variables: dict[str, ValueKind] = {}
        self._functions: list[str] = []
        self._libraries: list[str] = []
        self._hints: dict[str, ValueKind] = {}

    def _reset(self):
        self._variables = {}
        self._functions = []
        self._libraries = []
        self._hints = {}

    def analyze(self, source: str) -> Context:
        self._reset()
        self._scan_variables(source)
        self._scan_functions(source)
        self._scan_libraries(source)
        self._scan_hints(source)
        context = Context(
            variables=dict(self._variables),
            functions=tuple(self._functions),
            detected_libraries=tuple(self._libraries),
            data_structure_hints=dict(self._hints),
            has_basic_operations=bool(SourcePatterns.BASIC_OPERATION.search(source)),
        )
        logger.debug(
            "Analyzed %d chars: %d variables, %d functions, libraries=%s",
            len(source),
            len(context.variables),
            len(context.functions),
            list(context.detected_libraries),
        )
        return context

    def _scan_variables(self, source: str):
        for match in SourcePatterns.ASSIGNMENT.finditer(source):
            name, value = match.group(1), match.group(2)
            self._variables[name] = infer_kind(value)

    def _scan_functions(self, source: str):
        for match in SourcePatterns.FUNCTION_NAME.finditer(source):
            name = match.group(1)
            if name not in self._functions:
                self._functions.append(name)

    def _add_library(self, library: str):
        if library not in self._libraries:
            self._libraries.append(library)

    def _scan_libraries(self, source: str):
        # Substring sniffing: incidental matches are accepted false positives.
        if constants.NUMPY_PREFIX in source:
            self._add_library(constants.LIBRARY_NUMPY)
        if constants.SKLEARN_SCALER_CLASS in source:
            self._add_library(constants.LIBRARY_SKLEARN)

    def _scan_hints(self, source: str):
        if constants.NUMPY_ARRAY_IDIOM in source:
            self._hints[constants.NUMPY_ARRAY_IDIOM] = ValueKind.ARRAY


def analyze(source: str) -> Context:
    """Analyze *source* with a fresh analyzer."""
    return ContextAnalyzer().analyze(source)
