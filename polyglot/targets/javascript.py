"""JavaScriptTranslator — renders the shared rule sequence as JavaScript."""

from __future__ import annotations

from ..patterns import SourcePatterns
from ..rules import TranslationRule, regex_rule
from ..type_tables import library_equivalent
from ._base import BaseTranslator, indent_block, trim_body
from .. import constants


class JavaScriptTranslator(BaseTranslator):
    TARGET = constants.TARGET_JAVASCRIPT

    def _prelude_rules(self) -> list[TranslationRule]:
        return [
            regex_rule(
                "length_builtin",
                SourcePatterns.LEN_CALL,
                lambda m, ctx: self._render_length(m.group(1)),
            )
        ]

    def _render_function(self, name, params, indent):
        header = f"function {name}({', '.join(param for param, _ in params)}) {{"
        if not params:
            return header
        # JavaScript has no parameter types; carry them as JSDoc.
        doc = [f"{indent} * @param {{{js_type}}} {param}" for param, js_type in params]
        return "/**\n" + "\n".join(doc) + f"\n{indent} */\n{indent}{header}"

    def _render_dual_init(self, first, second):
        return f"let {first} = [];", f"let {second} = [];"

    def _render_loop(self, index, bound):
        return f"for (let {index} = 0; {index} < {bound}; {index}++) {{"

    def _render_print(self, content):
        return f"console.log({content});"

    def _render_append(self, name, value):
        return f"{name}.push({value});"

    def _render_slice(self, name, start, end):
        start = start or "0"
        if not end:
            return f"{name}.slice({start})"
        return f"{name}.slice({start}, {end})"

    def _render_length(self, name):
        return f"{name}.length"

    def _render_reshape(self, values, rows, cols):
        return f"matrix.Matrix.from1DArray({rows}, {cols}, {values})"

    def _render_fit_transform(self, target_var, scaler, values):
        return [f"const {target_var} = {scaler}.fit({values}).transform({values});"]

    def _render_scaler(self, name, low, high):
        return (
            f"const {name} = new MinMaxScaler({{ featureRange: [{low}, {high}] }});"
        )

    def _render_pair_return(self, first, second):
        return f"return [{first}, {second}];"

    def _render_constant(self, name, value):
        return f"const {name} = {value};"

    def _imports(self, body: str) -> list[str]:
        imports = []
        if "matrix.Matrix" in body:
            module = library_equivalent(constants.LIBRARY_NUMPY, self.TARGET)
            imports.append(f'const matrix = require("{module}");')
        if "MinMaxScaler" in body:
            module = library_equivalent(constants.LIBRARY_SKLEARN, self.TARGET)
            imports.append(f'const {{ MinMaxScaler }} = require("{module}");')
        return imports

    def _with_imports(self, imports: list[str], code: str) -> str:
        if not imports:
            return code
        return "\n".join(imports) + f"\n\n{code}"

    def _render_program(self, body):
        main = f"function main() {{\n{indent_block(trim_body(body))}\n}}\n\nmain();"
        return self._with_imports(self._imports(body), main)

    def _render_module(self, body):
        return self._with_imports(self._imports(body), body)
