"""Translation trace data types (pure data, no business logic)."""

from __future__ import annotations

from pydantic import BaseModel


class RuleStep(BaseModel):
    """Record of one rule's pass over the buffer."""

    rule: str
    fired: bool
    changed: bool

    def __str__(self) -> str:
        if not self.fired:
            return f"{self.rule}: skipped"
        return f"{self.rule}: {'rewrote' if self.changed else 'no match'}"


class TranslationTrace(BaseModel):
    """Full record of one target translation."""

    target: str
    output: str
    steps: list[RuleStep] = []

    @property
    def changed_rules(self) -> list[str]:
        return [step.rule for step in self.steps if step.changed]
