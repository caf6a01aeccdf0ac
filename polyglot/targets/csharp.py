"""CSharpTranslator — renders the shared rule sequence as C#."""

from __future__ import annotations

import re

from ..patterns import SourcePatterns
from ..rules import TranslationRule, regex_rule
from ._base import BaseTranslator, indent_block, trim_body
from .. import constants

_LINQ_USE = re.compile(r"\.(?:Skip|Take|ToArray|Count)\(")

MODULE_CLASS = "MLTranslator"
PROGRAM_CLASS = "Program"


class CSharpTranslator(BaseTranslator):
    TARGET = constants.TARGET_CSHARP

    FUNCTION_MODIFIERS = "public static (double[][] x, double[] y)"

    def _prelude_rules(self) -> list[TranslationRule]:
        return [
            regex_rule(
                "length_builtin",
                SourcePatterns.LEN_CALL,
                lambda m, ctx: self._render_length(m.group(1)),
            )
        ]

    def _render_function(self, name, params, indent):
        typed = ", ".join(f"{cs_type} {param}" for param, cs_type in params)
        return f"{self.FUNCTION_MODIFIERS} {name}({typed}) {{"

    def _render_dual_init(self, first, second):
        return (
            f"var {first} = new List<double[]>();",
            f"var {second} = new List<double>();",
        )

    def _render_loop(self, index, bound):
        return f"for (var {index} = 0; {index} < {bound}; {index}++) {{"

    def _render_print(self, content):
        return f"Console.WriteLine({content});"

    def _render_append(self, name, value):
        return f"{name}.Add({value});"

    def _render_slice(self, name, start, end):
        if not end:
            return f"{name}.Skip({start or 0}).ToArray()"
        if not start or start == "0":
            return f"{name}.Take({end}).ToArray()"
        return f"{name}.Skip({start}).Take({end} - {start}).ToArray()"

    def _render_length(self, name):
        return f"{name}.Count()"

    def _render_reshape(self, values, rows, cols):
        return (
            f"Matrix<double>.Build.DenseOfColumnMajor({rows}, {cols}, {values}.ToArray())"
        )

    def _render_fit_transform(self, target_var, scaler, values):
        return [
            "var mlContext = new MLContext();",
            f"// TODO: port {scaler}.fit_transform({values}) to "
            "mlContext.Transforms.NormalizeMinMax",
            f"var {target_var} = new List<double[]>(); // Placeholder",
        ]

    def _render_scaler(self, name, low, high):
        return (
            f"// {name}: MinMaxScaler over [{low}, {high}] maps to "
            "mlContext.Transforms.NormalizeMinMax"
        )

    def _render_pair_return(self, first, second):
        return f"return ({first}.ToArray(), {second}.ToArray());"

    def _render_constant(self, name, value):
        return f"const int {name} = {value};"

    def _usings(self, body: str) -> str:
        namespaces = ["System"]
        if "List<" in body:
            namespaces.append("System.Collections.Generic")
        if _LINQ_USE.search(body):
            namespaces.append("System.Linq")
        if "Matrix<double>" in body:
            namespaces.append("MathNet.Numerics.LinearAlgebra")
        if "MLContext" in body:
            namespaces.append("Microsoft.ML")
        return "\n".join(f"using {namespace};" for namespace in namespaces)

    def _render_program(self, body):
        inner = indent_block(trim_body(body), constants.INDENT * 2)
        return (
            f"{self._usings(body)}\n\n"
            f"public class {PROGRAM_CLASS}\n{{\n"
            f"{constants.INDENT}public static void Main(string[] args)\n"
            f"{constants.INDENT}{{\n{inner}\n{constants.INDENT}}}\n}}"
        )

    def _render_module(self, body):
        inner = indent_block(trim_body(body))
        return f"{self._usings(body)}\n\npublic class {MODULE_CLASS}\n{{\n{inner}\n}}"
