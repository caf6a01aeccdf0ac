"""Analysis report — a display-ready flattening of the analysis Context."""

from __future__ import annotations

from pydantic import BaseModel

from .context import Context, ValueKind
from .type_tables import library_equivalent
from . import constants


class AnalysisReport(BaseModel):
    variables: list[tuple[str, ValueKind]] = []
    functions: list[str] = []
    detected_libraries: list[str] = []
    data_structure_hints: list[tuple[str, ValueKind]] = []
    has_basic_operations: bool = False
    # library → {target → equivalent}
    library_equivalents: dict[str, dict[str, str]] = {}

    def __str__(self) -> str:
        lines = ["Variables:"]
        lines.extend(f"  {name}: {kind.value}" for name, kind in self.variables)
        lines.append(f"Functions: {', '.join(self.functions) or '-'}")
        lines.append("Detected libraries:")
        for library in self.detected_libraries:
            equivalents = self.library_equivalents.get(library, {})
            mapped = ", ".join(f"{t}={eq}" for t, eq in equivalents.items())
            lines.append(f"  {library} ({mapped})")
        lines.extend(
            f"Hint: {idiom} -> {kind.value}" for idiom, kind in self.data_structure_hints
        )
        lines.append(f"Basic operations: {'yes' if self.has_basic_operations else 'no'}")
        return "\n".join(lines)


def build_report(
    context: Context, targets: tuple[str, ...] = constants.SUPPORTED_TARGETS
) -> AnalysisReport:
    """Flatten *context* and look up library equivalents for *targets*."""
    return AnalysisReport(
        variables=list(context.variables.items()),
        functions=list(context.functions),
        detected_libraries=list(context.detected_libraries),
        data_structure_hints=list(context.data_structure_hints.items()),
        has_basic_operations=context.has_basic_operations,
        library_equivalents={
            library: {target: library_equivalent(library, target) for target in targets}
            for library in context.detected_libraries
        },
    )
