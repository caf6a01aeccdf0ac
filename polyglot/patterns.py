"""Compiled regular expressions for the source-notation idioms we recognise."""

from __future__ import annotations

import re


class SourcePatterns:
    """Idioms of the Python-like source notation, shared by analysis and rules."""

    # Analysis
    ASSIGNMENT = re.compile(r"\b(\w+)\s*=(?!=)\s*(.+)")
    FUNCTION_NAME = re.compile(r"def\s+(\w+)\(")
    BASIC_OPERATION = re.compile(r"[\w)\]]\s*[-+*/%]\s*[\w(\[]")
    INT_LITERAL = re.compile(r"^\d+$")
    FLOAT_LITERAL = re.compile(r"^\d+\.\d+$")
    BOOL_LITERAL = re.compile(r"\b(?:True|False|true|false)\b")

    # Rewriting
    COMMENT = re.compile(r"^([ \t]*)#[ \t]?(.*)$", re.MULTILINE)
    FUNCTION_DEF = re.compile(r"^([ \t]*)def\s+(\w+)\((.*?)\):", re.MULTILINE)
    DUAL_EMPTY_INIT = re.compile(
        r"^([ \t]*)(\w+)\s*,\s*(\w+)\s*=\s*\[\]\s*,\s*\[\]", re.MULTILINE
    )
    RANGE_LEN_MINUS = re.compile(r"range\(len\((\w+)\)\s*-\s*(\w+)\)")
    LEN_CALL = re.compile(r"\blen\((\w+)\)")
    COUNTING_LOOP = re.compile(r"for\s+(\w+)\s+in\s+range\((.*)\):")
    PRINT_CALL = re.compile(r"\bprint\((.*)\)")
    APPEND_CALL = re.compile(r"\b(\w+)\.append\((.*)\)")
    SLICE = re.compile(r"\b(\w+)\[([^\[\]:]*?):([^\[\]]*?)\s*\]")
    NUMPY_RESHAPE = re.compile(r"np\.array\((.*?)\)\.reshape\((.*?)\)")
    SCALER_FIT_TRANSFORM = re.compile(
        r"^([ \t]*)(\w+)\s*=\s*(\w+)\.fit_transform\((.*)\)[ \t]*$", re.MULTILINE
    )
    SCALER_CONSTRUCTOR = re.compile(
        r"^([ \t]*)(\w+)\s*=\s*MinMaxScaler\((?:feature_range\s*=\s*\((.*?)\))?.*\)[ \t]*$",
        re.MULTILINE,
    )
    NUMPY_PAIR_RETURN = re.compile(
        r"return\s+np\.array\((.*?)\)\s*,?\s*np\.array\((.*?)\)"
    )
    PLAIN_PAIR_RETURN = re.compile(
        r"^([ \t]*)return\s+(\w+)\s*,\s*(\w+)[ \t]*$", re.MULTILINE
    )
