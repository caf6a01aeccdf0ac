"""Rule-based translator from Python-like snippets to Go, PHP, JavaScript and C#."""

from .api import (  # noqa: F401
    analyze_source,
    translate_source,
    translate_traced,
    validate_translation,
    translate_all,
    library_equivalent,
)
