"""Normalization of code.json repository records.

Raw records arrive in one of several historical schema versions. Each
version family has its own pure formatter; all of them produce the same
canonical key set.

Notes:
- Formatters never mutate their input.
- Unknown schema versions are formatted as 1.0.0.
"""

from .formatter import FormatDispatch, Formatter, select_formatter
from .schema import (
    CANONICAL_FIELDS,
    SchemaFamily,
    build_repo_id,
    classify_document,
    classify_version,
    get_code_json_repos,
    get_code_json_version,
    is_v2_version,
    validate_canonical_record,
)
from .usage import get_usage_code
from .v1_formatter import format_v1_0_0, format_v1_0_1
from .v2_formatter import format_v2_0_0

__all__ = [
    "FormatDispatch",
    "Formatter",
    "select_formatter",
    "CANONICAL_FIELDS",
    "SchemaFamily",
    "build_repo_id",
    "classify_document",
    "classify_version",
    "get_code_json_repos",
    "get_code_json_version",
    "is_v2_version",
    "validate_canonical_record",
    "get_usage_code",
    "format_v1_0_0",
    "format_v1_0_1",
    "format_v2_0_0",
]
