"""Translation rules — ordered (predicate, transform) steps over a text buffer."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable

from .context import Context
from .trace_types import RuleStep

logger = logging.getLogger(__name__)

Transform = Callable[[str, Context], str]
Predicate = Callable[[str, Context], bool]
Rewrite = Callable[[re.Match, Context], str]


def always(text: str, context: Context) -> bool:
    return True


@dataclass(frozen=True)
class TranslationRule:
    """One step of a target's rewrite pipeline.

    ``transform`` receives the current buffer and returns a new one; it is
    only invoked when ``predicate`` holds for that same buffer.
    """

    name: str
    transform: Transform
    predicate: Predicate = always

    def apply(self, text: str, context: Context) -> tuple[str, RuleStep]:
        if not self.predicate(text, context):
            return text, RuleStep(rule=self.name, fired=False, changed=False)
        rewritten = self.transform(text, context)
        changed = rewritten != text
        if changed:
            logger.debug("rule %s rewrote buffer", self.name)
        return rewritten, RuleStep(rule=self.name, fired=True, changed=changed)


def regex_rule(
    name: str,
    pattern: re.Pattern,
    rewrite: Rewrite,
    predicate: Predicate = always,
) -> TranslationRule:
    """Build a rule that substitutes every match of *pattern* via *rewrite*."""

    def transform(text: str, context: Context) -> str:
        return pattern.sub(lambda m: rewrite(m, context), text)

    return TranslationRule(name=name, transform=transform, predicate=predicate)


def library_gate(library: str, marker: str) -> Predicate:
    """Predicate: *library* was detected and *marker* is still in the buffer."""

    def predicate(text: str, context: Context) -> bool:
        return context.uses_library(library) and marker in text

    return predicate


def apply_rules(
    rules: list[TranslationRule], source: str, context: Context
) -> tuple[str, list[RuleStep]]:
    """Run *rules* left to right, each over the previous rule's output."""
    text = source
    steps: list[RuleStep] = []
    for rule in rules:
        text, step = rule.apply(text, context)
        steps.append(step)
    return text, steps
