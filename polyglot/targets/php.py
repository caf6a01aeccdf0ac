"""PhpTranslator — renders the shared rule sequence as PHP."""

from __future__ import annotations

import re

from ..patterns import SourcePatterns
from ..rules import TranslationRule, regex_rule
from ._base import BaseTranslator, trim_body
from .. import constants

_IDENTIFIER = re.compile(r"^[A-Za-z_]\w*$")

OPEN_TAG = "<?php"
CLOSE_TAG = "?>"
AUTOLOAD = "require __DIR__ . '/vendor/autoload.php';"
_COMPOSER_NAMESPACES: tuple[str, ...] = ("\\MathPHP\\", "\\Phpml\\")


def php_var(expr: str) -> str:
    """Prefix bare identifiers with ``$``; leave other expressions alone."""
    return f"${expr}" if _IDENTIFIER.match(expr) else expr


class PhpTranslator(BaseTranslator):
    TARGET = constants.TARGET_PHP

    def _prelude_rules(self) -> list[TranslationRule]:
        return [
            regex_rule(
                "length_builtin",
                SourcePatterns.LEN_CALL,
                lambda m, ctx: self._render_length(m.group(1)),
            )
        ]

    def _render_function(self, name, params, indent):
        typed = ", ".join(f"{php_type} ${param}" for param, php_type in params)
        return f"function {name}({typed}) {{"

    def _render_dual_init(self, first, second):
        return f"${first} = [];", f"${second} = [];"

    def _render_loop(self, index, bound):
        return f"for (${index} = 0; ${index} < {bound}; ${index}++) {{"

    def _render_print(self, content):
        return f"echo {content};"

    def _render_append(self, name, value):
        return f"array_push(${name}, {value});"

    def _render_slice(self, name, start, end):
        start = start or "0"
        if not end:
            return f"array_slice(${name}, {start})"
        if start == "0":
            return f"array_slice(${name}, 0, {end})"
        return f"array_slice(${name}, {start}, ({end} - {start}))"

    def _render_length(self, name):
        return f"count(${name})"

    def _render_reshape(self, values, rows, cols):
        return (
            f"(new \\MathPHP\\LinearAlgebra\\Matrix({php_var(values)}))"
            f"->reshape({rows}, {cols})"
        )

    def _render_fit_transform(self, target_var, scaler, values):
        values = php_var(values)
        return [
            f"${target_var} = (new \\Phpml\\Preprocessing\\Normalizer())",
            f"{constants.INDENT}->fit({values})",
            f"{constants.INDENT}->transform({values});",
        ]

    def _render_scaler(self, name, low, high):
        return (
            f"// ${name}: MinMaxScaler over [{low}, {high}] is approximated by "
            "\\Phpml\\Preprocessing\\Normalizer"
        )

    def _render_pair_return(self, first, second):
        return f"return array({php_var(first)}, {php_var(second)});"

    def _render_constant(self, name, value):
        return f"const {name} = {value};"

    def _render_program(self, body):
        return self._render_module(body)

    def _render_module(self, body):
        header = OPEN_TAG
        if any(namespace in body for namespace in _COMPOSER_NAMESPACES):
            header = f"{OPEN_TAG}\n\n{AUTOLOAD}"
        return f"{header}\n\n{trim_body(body)}\n\n{CLOSE_TAG}"
