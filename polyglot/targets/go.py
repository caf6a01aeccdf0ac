"""GoTranslator — renders the shared rule sequence as Go."""

from __future__ import annotations

import re

from ..context import Context
from ..patterns import SourcePatterns
from ..rules import TranslationRule, regex_rule
from ._base import BaseTranslator, indent_block, trim_body
from .. import constants

_MAT_USE = re.compile(r"\bmat\.")
_STAT_USE = re.compile(r"\bstat\.")
_MATH_USE = re.compile(r"\bmath\.")

GONUM_MAT = "gonum.org/v1/gonum/mat"
GONUM_STAT = "gonum.org/v1/gonum/stat"


def _lacks_return(text: str, context: Context) -> bool:
    return "func " in text and "return" not in text


def _add_default_return(text: str, context: Context) -> str:
    return (
        text.rstrip()
        + f'\n{constants.INDENT}return nil, nil, fmt.Errorf("function not implemented")'
    )


class GoTranslator(BaseTranslator):
    TARGET = constants.TARGET_GO

    # Two result slices plus an explicit error, Go's multi-value convention.
    FUNCTION_RESULTS = "(x, y [][]float64, err error)"

    def _prelude_rules(self) -> list[TranslationRule]:
        return [
            regex_rule(
                "range_bounds_guard",
                SourcePatterns.RANGE_LEN_MINUS,
                lambda m, ctx: (
                    f"range(int(math.Max(0, float64(len({m.group(1)}) - {m.group(2)}))))"
                ),
            )
        ]

    def _closing_rules(self) -> list[TranslationRule]:
        return [
            TranslationRule(
                name="default_return",
                transform=_add_default_return,
                predicate=_lacks_return,
            )
        ]

    def _render_function(self, name, params, indent):
        typed = ", ".join(f"{param} {go_type}" for param, go_type in params)
        return f"func {name}({typed}) {self.FUNCTION_RESULTS} {{"

    def _render_dual_init(self, first, second):
        return (
            f"{first} := make([][]float64, 0)",
            f"{second} := make([]float64, 0)",
        )

    def _render_loop(self, index, bound):
        return f"for {index} := 0; {index} < {bound}; {index}++ {{"

    def _render_print(self, content):
        return f"fmt.Println({content})"

    def _render_append(self, name, value):
        return f"{name} = append({name}, {value})"

    def _render_slice(self, name, start, end):
        return f"{name}[{start}:{end}]"

    def _render_length(self, name):
        return f"len({name})"

    def _render_reshape(self, values, rows, cols):
        return f"mat.NewDense({rows}, {cols}, {values})"

    def _render_fit_transform(self, target_var, scaler, values):
        return [
            f"var {target_var} mat.Dense",
            f"// TODO: port {scaler}.fit_transform with gonum/stat",
            f"// stat.UnitNorm({target_var}, {values}, 0, false)",
        ]

    def _render_scaler(self, name, low, high):
        return f"// {name}: MinMaxScaler over [{low}, {high}] has no direct gonum equivalent"

    def _render_pair_return(self, first, second):
        return f"return {first}, {second}, nil // Success"

    def _render_constant(self, name, value):
        return f"const {name} = {value} // Sequence length for time series"

    def _imports(self, body: str) -> str:
        packages = ["fmt"]
        if _MATH_USE.search(body):
            packages.append("math")
        if _MAT_USE.search(body):
            packages.append(GONUM_MAT)
        if _STAT_USE.search(body):
            packages.append(GONUM_STAT)
        if len(packages) == 1:
            return f'import "{packages[0]}"'
        lines = "\n".join(f'{constants.INDENT}"{pkg}"' for pkg in packages)
        return f"import (\n{lines}\n)"

    def _render_program(self, body):
        return (
            f"package main\n\n{self._imports(body)}\n\n"
            f"func main() {{\n{indent_block(trim_body(body))}\n}}"
        )

    def _render_module(self, body):
        return f"package main\n\n{self._imports(body)}\n\n{body}"
