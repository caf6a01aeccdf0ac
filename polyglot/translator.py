"""Translator interface — source snippet to one target notation."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .context import Context
from .trace_types import TranslationTrace


class Translator(ABC):
    TARGET: str = ""

    @abstractmethod
    def translate_traced(self, source: str, context: Context) -> TranslationTrace:
        ...

    def translate(self, source: str, context: Context) -> str:
        return self.translate_traced(source, context).output
