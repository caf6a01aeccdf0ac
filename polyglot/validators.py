"""Per-target syntax-plausibility checks over translated text.

Every check is an independent substring/pattern test for a common omission
in that target; ``validate`` runs all of them and collects every message.
An empty result means nothing was detected, not that the code compiles.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable

from . import constants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Check:
    name: str
    fires: Callable[[str], bool]
    message: str


class SyntaxValidator:
    TARGET: str = ""
    CHECKS: tuple[Check, ...] = ()

    def validate(self, text: str) -> list[str]:
        warnings = [check.message for check in self.CHECKS if check.fires(text)]
        logger.debug("%s validation: %d warning(s)", self.TARGET, len(warnings))
        return warnings


def _missing(used: re.Pattern, required: str) -> Callable[[str], bool]:
    """Check factory: *used* occurs but the *required* text does not."""

    def fires(text: str) -> bool:
        return bool(used.search(text)) and required not in text

    return fires


# ── Go ───────────────────────────────────────────────────────────

_GO_FUNC = re.compile(r"func\s+(\w+)\(([^)]*)\)\s*([^{\n]*)\{")
_GO_SLICE = re.compile(r"\w\[[^\[\]\n]*:[^\[\]\n]*\]")


def _go_functions(text: str) -> list[tuple[str, str, str]]:
    """(name, params, results) for every declared function except ``main``."""
    return [
        (m.group(1), m.group(2), m.group(3).strip())
        for m in _GO_FUNC.finditer(text)
        if m.group(1) != "main"
    ]


def _go_untyped_params(text: str) -> bool:
    return any(
        len(param.split()) < 2
        for _, params, _ in _go_functions(text)
        for param in params.split(",")
        if param.strip()
    )


def _go_missing_results(text: str) -> bool:
    return any(not results for _, _, results in _go_functions(text))


def _go_missing_error(text: str) -> bool:
    return bool(_go_functions(text)) and "error" not in text


def _go_unchecked_slice(text: str) -> bool:
    return bool(_GO_SLICE.search(text)) and "len(" not in text


class GoValidator(SyntaxValidator):
    TARGET = constants.TARGET_GO
    CHECKS = (
        Check("typed_params", _go_untyped_params, "Go function parameters need types"),
        Check(
            "return_type",
            _go_missing_results,
            "Go function must declare its return type",
        ),
        Check(
            "fmt_import",
            _missing(re.compile(r"\bfmt\."), '"fmt"'),
            'Missing import "fmt"',
        ),
        Check(
            "math_import",
            _missing(re.compile(r"\bmath\."), '"math"'),
            'Missing import "math"',
        ),
        Check(
            "error_result",
            _go_missing_error,
            "Consider returning an error value (idiomatic Go error handling)",
        ),
        Check(
            "slice_bounds",
            _go_unchecked_slice,
            "Check bounds on slice operations",
        ),
    )


# ── PHP ──────────────────────────────────────────────────────────

_PHP_TAG_NEEDED = re.compile(r"\b(?:function|echo)\b")
_PHP_COMPOSER_USE = re.compile(r"\\(?:MathPHP|Phpml)\\")
_PHP_PUSH_NON_VAR = re.compile(r"array_push\(\s*(?!\$)")


class PhpValidator(SyntaxValidator):
    TARGET = constants.TARGET_PHP
    CHECKS = (
        Check(
            "open_tag",
            _missing(_PHP_TAG_NEEDED, "<?php"),
            "Missing PHP opening tag <?php",
        ),
        Check(
            "autoload",
            _missing(_PHP_COMPOSER_USE, "vendor/autoload.php"),
            "Composer library referenced without vendor/autoload.php",
        ),
        Check(
            "push_target",
            lambda text: bool(_PHP_PUSH_NON_VAR.search(text)),
            "array_push target must be a $variable",
        ),
    )


# ── JavaScript ───────────────────────────────────────────────────

_JS_SCALER_IMPORT = re.compile(r"MinMaxScaler\s*\}\s*=\s*require\(")


def _js_scaler_not_required(text: str) -> bool:
    return "MinMaxScaler" in text and not _JS_SCALER_IMPORT.search(text)


class JavaScriptValidator(SyntaxValidator):
    TARGET = constants.TARGET_JAVASCRIPT
    CHECKS = (
        Check(
            "matrix_require",
            _missing(re.compile(r"\bmatrix\."), "ml-matrix"),
            'Missing require("ml-matrix")',
        ),
        Check(
            "scaler_require",
            _js_scaler_not_required,
            "MinMaxScaler used without a require",
        ),
        Check(
            "numpy_leftover",
            lambda text: bool(re.search(r"\bnp\.", text)),
            "Untranslated numpy call left in output",
        ),
    )


# ── C# ───────────────────────────────────────────────────────────


class CSharpValidator(SyntaxValidator):
    TARGET = constants.TARGET_CSHARP
    CHECKS = (
        Check(
            "using_system",
            _missing(re.compile(r"\bConsole\.WriteLine\b"), "using System;"),
            "Missing using System;",
        ),
        Check(
            "using_generic",
            _missing(re.compile(r"\bList<"), "using System.Collections.Generic;"),
            "Missing using System.Collections.Generic;",
        ),
        Check(
            "using_linq",
            _missing(re.compile(r"\.(?:Skip|Take|ToArray|Count)\("), "using System.Linq;"),
            "Missing using System.Linq;",
        ),
        Check(
            "using_mlnet",
            _missing(re.compile(r"\bMLContext\b"), "using Microsoft.ML;"),
            "Missing using Microsoft.ML;",
        ),
    )


_VALIDATORS: dict[str, type[SyntaxValidator]] = {
    constants.TARGET_GO: GoValidator,
    constants.TARGET_PHP: PhpValidator,
    constants.TARGET_JAVASCRIPT: JavaScriptValidator,
    constants.TARGET_CSHARP: CSharpValidator,
}


def get_validator(target: str) -> SyntaxValidator:
    """Instantiate the validator for *target*.

    Raises ``ValueError`` if *target* has no registered validator.
    """
    cls = _VALIDATORS.get(target)
    if cls is None:
        raise ValueError(f"Unsupported target: {target}")
    return cls()
