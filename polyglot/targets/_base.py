"""BaseTranslator — target-agnostic rule pipeline over source text.

Subclasses only render target syntax; the order in which rule categories run
is fixed here, because later rules depend on the output of earlier ones (for
example, block repair must count the braces emitted by signature and loop
rewrites).
"""

from __future__ import annotations

import logging
import re
from abc import abstractmethod

from ..context import Context, ValueKind
from ..patterns import SourcePatterns
from ..rules import TranslationRule, apply_rules, library_gate, regex_rule
from ..trace_types import TranslationTrace
from ..translator import Translator
from ..type_tables import type_for
from .. import constants

logger = logging.getLogger(__name__)

_ARRAY_PARAM_HINTS: tuple[str, ...] = ("price", "data")
_INT_PARAM_HINTS: tuple[str, ...] = ("index", "size")


def infer_param_kind(name: str, context: Context) -> ValueKind:
    """Guess a parameter's kind from its name, then from the Context."""
    if any(hint in name for hint in _ARRAY_PARAM_HINTS):
        return ValueKind.ARRAY
    if any(hint in name for hint in _INT_PARAM_HINTS):
        return ValueKind.INT
    return context.kind_of(name)


def split_params(params: str) -> list[str]:
    """Parameter names of a ``def`` header, without defaults or annotations."""
    names = []
    for raw in params.split(","):
        name = raw.split("=")[0].split(":")[0].strip().lstrip("*")
        if name:
            names.append(name)
    return names


def indent_block(text: str, prefix: str = constants.INDENT) -> str:
    return "\n".join(
        f"{prefix}{line}" if line.strip() else line for line in text.split("\n")
    )


def trim_body(text: str) -> str:
    """Drop surrounding blank lines and trailing whitespace."""
    return text.strip("\n").rstrip()


def brace_deficit(text: str) -> int:
    return text.count(constants.BLOCK_OPEN) - text.count(constants.BLOCK_CLOSE)


def repair_blocks(text: str, context: Context) -> str:
    """Append one closing brace per unmatched opening brace.

    Counts characters only, so braces inside strings or comments are
    counted too.
    """
    deficit = brace_deficit(text)
    if deficit <= 0:
        return text
    logger.debug("Appending %d closing brace(s)", deficit)
    return text.rstrip() + f"\n{constants.BLOCK_CLOSE}" * deficit


def _needs_window_constant(text: str, context: Context) -> bool:
    name = constants.WINDOW_CONSTANT_NAME
    return name in text and name not in context.variables


class BaseTranslator(Translator):
    """Shared rule sequence; subclasses provide the ``_render_*`` hooks."""

    def __init__(self):
        self._rules: list[TranslationRule] = self._build_rules()

    @property
    def rules(self) -> list[TranslationRule]:
        return list(self._rules)

    def _build_rules(self) -> list[TranslationRule]:
        return [
            regex_rule("comment", SourcePatterns.COMMENT, self._rewrite_comment),
            regex_rule(
                "function_signature",
                SourcePatterns.FUNCTION_DEF,
                self._rewrite_function,
            ),
            regex_rule(
                "dual_empty_init",
                SourcePatterns.DUAL_EMPTY_INIT,
                self._rewrite_dual_init,
            ),
            *self._prelude_rules(),
            regex_rule(
                "counting_loop", SourcePatterns.COUNTING_LOOP, self._rewrite_loop
            ),
            regex_rule("output_call", SourcePatterns.PRINT_CALL, self._rewrite_print),
            regex_rule("append", SourcePatterns.APPEND_CALL, self._rewrite_append),
            regex_rule("slice", SourcePatterns.SLICE, self._rewrite_slice),
            regex_rule(
                "numpy_reshape",
                SourcePatterns.NUMPY_RESHAPE,
                self._rewrite_reshape,
                library_gate(constants.LIBRARY_NUMPY, constants.NUMPY_ARRAY_IDIOM),
            ),
            regex_rule(
                "scaler_fit_transform",
                SourcePatterns.SCALER_FIT_TRANSFORM,
                self._rewrite_fit_transform,
                library_gate(constants.LIBRARY_SKLEARN, constants.FIT_TRANSFORM_IDIOM),
            ),
            regex_rule(
                "scaler_constructor",
                SourcePatterns.SCALER_CONSTRUCTOR,
                self._rewrite_scaler,
                library_gate(
                    constants.LIBRARY_SKLEARN, constants.SKLEARN_SCALER_CLASS
                ),
            ),
            regex_rule(
                "numpy_pair_return",
                SourcePatterns.NUMPY_PAIR_RETURN,
                lambda m, ctx: self._render_pair_return(m.group(1), m.group(2)),
            ),
            regex_rule(
                "pair_return",
                SourcePatterns.PLAIN_PAIR_RETURN,
                lambda m, ctx: m.group(1)
                + self._render_pair_return(m.group(2), m.group(3)),
            ),
            TranslationRule(
                name="window_constant",
                transform=self._declare_window_constant,
                predicate=_needs_window_constant,
            ),
            *self._closing_rules(),
            TranslationRule(name="block_repair", transform=repair_blocks),
            TranslationRule(name="boilerplate", transform=self._wrap),
        ]

    # ── hooks for target-only rules ──────────────────────────────

    def _prelude_rules(self) -> list[TranslationRule]:
        """Rules that must run before the counting-loop rewrite."""
        return []

    def _closing_rules(self) -> list[TranslationRule]:
        """Rules that must run right before block repair."""
        return []

    # ── entry point ──────────────────────────────────────────────

    def translate_traced(self, source: str, context: Context) -> TranslationTrace:
        logger.debug("Translating %d chars to %s", len(source), self.TARGET)
        output, steps = apply_rules(self._rules, source, context)
        return TranslationTrace(target=self.TARGET, output=output, steps=steps)

    # ── shared rewrites ──────────────────────────────────────────

    def _rewrite_comment(self, m: re.Match, context: Context) -> str:
        return f"{m.group(1)}// {m.group(2)}"

    def _typed_params(self, params: str, context: Context) -> list[tuple[str, str]]:
        return [
            (name, type_for(infer_param_kind(name, context), self.TARGET))
            for name in split_params(params)
        ]

    def _rewrite_function(self, m: re.Match, context: Context) -> str:
        indent, name, params = m.group(1), m.group(2), m.group(3)
        return indent + self._render_function(
            name, self._typed_params(params, context), indent
        )

    def _rewrite_dual_init(self, m: re.Match, context: Context) -> str:
        indent, first, second = m.group(1), m.group(2), m.group(3)
        first_decl, second_decl = self._render_dual_init(first, second)
        return f"{indent}{first_decl}\n{indent}{second_decl}"

    def _rewrite_loop(self, m: re.Match, context: Context) -> str:
        return self._render_loop(m.group(1), m.group(2).strip())

    def _rewrite_print(self, m: re.Match, context: Context) -> str:
        return self._render_print(m.group(1))

    def _rewrite_append(self, m: re.Match, context: Context) -> str:
        return self._render_append(m.group(1), m.group(2))

    def _rewrite_slice(self, m: re.Match, context: Context) -> str:
        return self._render_slice(m.group(1), m.group(2).strip(), m.group(3).strip())

    def _rewrite_reshape(self, m: re.Match, context: Context) -> str:
        values = m.group(1).strip()
        shape = [part.strip() for part in m.group(2).split(",")]
        rows = shape[0] if shape and shape[0] else "-1"
        cols = shape[1] if len(shape) > 1 and shape[1] else "1"
        if rows == "-1":
            rows = self._render_length(values)
        return self._render_reshape(values, rows, cols)

    def _rewrite_fit_transform(self, m: re.Match, context: Context) -> str:
        indent, target_var, values = m.group(1), m.group(2), m.group(4).strip()
        lines = self._render_fit_transform(target_var, m.group(3), values)
        return "\n".join(indent + line for line in lines)

    def _rewrite_scaler(self, m: re.Match, context: Context) -> str:
        indent, name = m.group(1), m.group(2)
        feature_range = m.group(3) or "0, 1"
        low, _, high = feature_range.partition(",")
        return indent + self._render_scaler(name, low.strip(), high.strip() or "1")

    def _declare_window_constant(self, text: str, context: Context) -> str:
        declaration = self._render_constant(
            constants.WINDOW_CONSTANT_NAME, constants.WINDOW_CONSTANT_DEFAULT
        )
        return f"{declaration}\n\n{text}"

    def _wrap(self, text: str, context: Context) -> str:
        if not context.functions:
            return self._render_program(text)
        return self._render_module(text)

    # ── target syntax ────────────────────────────────────────────

    @abstractmethod
    def _render_function(
        self, name: str, params: list[tuple[str, str]], indent: str
    ) -> str: ...

    @abstractmethod
    def _render_dual_init(self, first: str, second: str) -> tuple[str, str]: ...

    @abstractmethod
    def _render_loop(self, index: str, bound: str) -> str: ...

    @abstractmethod
    def _render_print(self, content: str) -> str: ...

    @abstractmethod
    def _render_append(self, name: str, value: str) -> str: ...

    @abstractmethod
    def _render_slice(self, name: str, start: str, end: str) -> str: ...

    @abstractmethod
    def _render_length(self, name: str) -> str: ...

    @abstractmethod
    def _render_reshape(self, values: str, rows: str, cols: str) -> str: ...

    @abstractmethod
    def _render_fit_transform(
        self, target_var: str, scaler: str, values: str
    ) -> list[str]: ...

    @abstractmethod
    def _render_scaler(self, name: str, low: str, high: str) -> str: ...

    @abstractmethod
    def _render_pair_return(self, first: str, second: str) -> str: ...

    @abstractmethod
    def _render_constant(self, name: str, value: int) -> str: ...

    @abstractmethod
    def _render_program(self, body: str) -> str:
        """Wrap a function-less snippet in a minimal runnable program."""

    @abstractmethod
    def _render_module(self, body: str) -> str:
        """Prepend the imports implied by *body*."""
