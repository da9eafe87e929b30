from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Mapping

from codejson.config import DEFAULT_USAGE_CODE, DEFAULT_USAGE_CODES

from .schema import CANONICAL_FIELDS, build_repo_id
from .usage import get_usage_code

V2_COPY_FIELDS = tuple(f for f in CANONICAL_FIELDS if f != "repoID")


def format_v2_0_0(
    raw: Mapping[str, Any],
    *,
    usage_codes: Mapping[str, str] = DEFAULT_USAGE_CODES,
    default_usage_code: str = DEFAULT_USAGE_CODE,
) -> Dict[str, Any]:
    """Canonical record from a 2.x release.

    Fields are copied through unchanged (agency requirements keep their raw
    0-1 scores); anything outside the canonical set is dropped.
    """

    out: Dict[str, Any] = {f: deepcopy(raw.get(f)) for f in V2_COPY_FIELDS}
    usage_code = get_usage_code(out, usage_codes, default_usage_code)
    out["repoID"] = build_repo_id(out, usage_code)
    return out
