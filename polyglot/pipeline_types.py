"""Translation pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from .report import AnalysisReport
from .scoring import confidence_score
from . import constants


@dataclass(frozen=True)
class TranslationConfig:
    """Groups translation pipeline configuration."""

    targets: tuple[str, ...] = constants.SUPPORTED_TARGETS
    grammar_check: bool = False


class TranslationResult(BaseModel):
    """Everything one request hands back to the presentation layer."""

    translations: dict[str, str] = {}
    warnings: dict[str, list[str]] = {}
    report: AnalysisReport = AnalysisReport()

    def confidence(self, target: str) -> int:
        """Score derived on demand, so it always matches current warnings.

        Raises ``KeyError`` if *target* was not translated.
        """
        if target not in self.translations:
            raise KeyError(f"No translation for target: {target}")
        return confidence_score(self.warnings.get(target, []))

    def confidences(self) -> dict[str, int]:
        return {target: self.confidence(target) for target in self.translations}
