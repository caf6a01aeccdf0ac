"""Rule-based translators for every supported target notation."""

from __future__ import annotations

from ._base import BaseTranslator
from ..constants import SUPPORTED_TARGETS
from .. import constants

# Lazy imports to avoid loading every target at startup
_TRANSLATOR_CLASSES: dict[str, str] = {
    constants.TARGET_GO: "go.GoTranslator",
    constants.TARGET_PHP: "php.PhpTranslator",
    constants.TARGET_JAVASCRIPT: "javascript.JavaScriptTranslator",
    constants.TARGET_CSHARP: "csharp.CSharpTranslator",
}


def get_translator(target: str) -> BaseTranslator:
    """Instantiate the translator for *target*.

    Raises ``ValueError`` if *target* has no registered translator.
    """
    spec = _TRANSLATOR_CLASSES.get(target)
    if spec is None:
        raise ValueError(f"Unsupported target: {target}")
    module_name, class_name = spec.split(".")
    import importlib

    mod = importlib.import_module(f".{module_name}", package=__package__)
    cls = getattr(mod, class_name)
    return cls()


__all__ = [
    "BaseTranslator",
    "get_translator",
    "SUPPORTED_TARGETS",
]
