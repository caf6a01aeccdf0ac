"""Composable API functions for the snippet translation pipeline.

Each function corresponds to a CLI workflow but is callable programmatically
without argparse.
"""

from __future__ import annotations

import logging
from typing import Optional

from .analyzer import ContextAnalyzer
from .context import Context
from .grammar_check import grammar_warnings
from .parser import ParserFactory
from .pipeline_types import TranslationConfig, TranslationResult
from .report import build_report
from .targets import get_translator
from .trace_types import TranslationTrace
from .type_tables import library_equivalent as _library_equivalent
from .validators import get_validator

logger = logging.getLogger(__name__)


def analyze_source(source: str) -> Context:
    """Run the shallow static analysis over *source*.

    Args:
        source: The source snippet text.

    Returns:
        An immutable Context.
    """
    return ContextAnalyzer().analyze(source)


def translate_traced(
    source: str,
    target: str,
    context: Optional[Context] = None,
) -> TranslationTrace:
    """Translate *source* to *target* and record every rule step.

    Args:
        source: The source snippet text.
        target: Target id (e.g. "go", "csharp").
        context: A Context from ``analyze_source``; analysed here when omitted.

    Returns:
        A TranslationTrace with the output and per-rule steps.

    Raises:
        ValueError: If *target* is not supported.
    """
    translator = get_translator(target)
    if context is None:
        context = analyze_source(source)
    return translator.translate_traced(source, context)


def translate_source(
    source: str,
    target: str,
    context: Optional[Context] = None,
) -> str:
    """Translate *source* to *target* and return the translated text."""
    return translate_traced(source, target, context).output


def validate_translation(
    text: str,
    target: str,
    grammar_check: bool = False,
    parser_factory: Optional[ParserFactory] = None,
) -> list[str]:
    """Run *target*'s validator (and optionally its grammar) over *text*.

    Args:
        text: Translated text.
        target: Target id.
        grammar_check: Also parse *text* with the target's tree-sitter grammar.
        parser_factory: Parser factory override for the grammar check.

    Returns:
        Warning strings; empty when no check fired.
    """
    warnings = get_validator(target).validate(text)
    if grammar_check:
        warnings.extend(grammar_warnings(text, target, parser_factory))
    return warnings


def translate_all(
    source: str,
    config: TranslationConfig = TranslationConfig(),
    parser_factory: Optional[ParserFactory] = None,
) -> TranslationResult:
    """Analyse once, then translate and validate for every configured target.

    Args:
        source: The source snippet text.
        config: Target selection and grammar-check switch.
        parser_factory: Parser factory override for the grammar check.

    Returns:
        A TranslationResult with translations, warnings and the report.
    """
    logger.info(
        "Translating %d chars to %s (grammar_check=%s)",
        len(source),
        ", ".join(config.targets),
        config.grammar_check,
    )
    context = analyze_source(source)
    translations: dict[str, str] = {}
    warnings: dict[str, list[str]] = {}
    for target in config.targets:
        text = translate_source(source, target, context)
        translations[target] = text
        warnings[target] = validate_translation(
            text, target, config.grammar_check, parser_factory
        )
        logger.info("%s: %d warning(s)", target, len(warnings[target]))
    return TranslationResult(
        translations=translations,
        warnings=warnings,
        report=build_report(context, config.targets),
    )


def library_equivalent(library: str, target: str) -> str:
    """Return *target*'s equivalent of a source library, or "not available"."""
    return _library_equivalent(library, target)
