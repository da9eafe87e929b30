from __future__ import annotations

from typing import Any, Mapping

from codejson.config import DEFAULT_USAGE_CODE, DEFAULT_USAGE_CODES


def get_usage_code(
    record: Mapping[str, Any],
    usage_codes: Mapping[str, str] = DEFAULT_USAGE_CODES,
    default: str = DEFAULT_USAGE_CODE,
) -> str:
    """Single-character usage code for permissions.usageType.

    Unknown or missing usage types map to the default code.
    """

    permissions = record.get("permissions") if isinstance(record, Mapping) else None
    if not isinstance(permissions, Mapping):
        return default
    usage_type = permissions.get("usageType")
    if not isinstance(usage_type, str):
        return default
    return usage_codes.get(usage_type, default)
