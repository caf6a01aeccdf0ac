"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

TARGET_GO = "go"
TARGET_PHP = "php"
TARGET_JAVASCRIPT = "javascript"
TARGET_CSHARP = "csharp"

SUPPORTED_TARGETS: tuple[str, ...] = (
    TARGET_GO,
    TARGET_PHP,
    TARGET_JAVASCRIPT,
    TARGET_CSHARP,
)

LIBRARY_NUMPY = "numpy"
LIBRARY_SKLEARN = "sklearn"

NUMPY_PREFIX = "np."
NUMPY_ARRAY_IDIOM = "np.array"
SKLEARN_SCALER_CLASS = "MinMaxScaler"
FIT_TRANSFORM_IDIOM = ".fit_transform("

NOT_AVAILABLE = "not available"

CONFIDENCE_BASE = 95
CONFIDENCE_PENALTY_PER_WARNING = 10

WINDOW_CONSTANT_NAME = "LOOKBACK"
WINDOW_CONSTANT_DEFAULT = 10

BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"

INDENT = "    "
