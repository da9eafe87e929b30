from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Dict, List, Mapping, Optional

from codejson.config import DEFAULT_USAGE_CODE, DEFAULT_USAGE_CODES
from codejson.utils.urls import is_valid_url

from .schema import build_repo_id
from .usage import get_usage_code

log = logging.getLogger("codejson.formatter")

# 1.x numeric exemption codes
EXEMPTION_USAGE_TYPES = {
    1: "exemptByLaw",
    2: "exemptByNationalSecurity",
    3: "exemptByAgencySystem",
    4: "exemptByAgencyMission",
    5: "exemptByCIO",
}


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes"}
    return value is True or value == 1


def _exemption_code(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _licenses(raw: Mapping[str, Any]) -> Optional[List[Dict[str, Any]]]:
    license_ = raw.get("license")
    if not license_ or not isinstance(license_, str):
        return None
    if is_valid_url(license_):
        return [{"URL": license_, "name": None}]
    return [{"URL": None, "name": license_}]


def _usage_type(raw: Mapping[str, Any], *, allow_reuse: bool) -> Optional[str]:
    if _flag(raw.get("openSourceProject")):
        return "openSource"
    if allow_reuse and _flag(raw.get("governmentWideReuseProject")):
        return "governmentWideReuse"

    code = _exemption_code(raw.get("exemption"))
    if code is None:
        return None
    usage_type = EXEMPTION_USAGE_TYPES.get(code)
    if usage_type is None:
        log.debug("unknown 1.x exemption code %r", raw.get("exemption"))
    return usage_type


def _upgrade_permissions(raw: Mapping[str, Any], *, allow_reuse: bool) -> Dict[str, Any]:
    existing = raw.get("permissions")
    if isinstance(existing, Mapping):
        return deepcopy(existing)
    return {
        "licenses": _licenses(raw),
        "usageType": _usage_type(raw, allow_reuse=allow_reuse),
        "exemptionText": raw.get("exemptionText"),
    }


def _format_v1(
    raw: Mapping[str, Any],
    *,
    allow_reuse: bool,
    usage_codes: Mapping[str, str],
    default_usage_code: str,
) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "name": raw.get("name"),
        "description": raw.get("description"),
        "permissions": _upgrade_permissions(raw, allow_reuse=allow_reuse),
        "tags": deepcopy(raw.get("tags")),
        "contact": deepcopy(raw.get("contact")),
        "repositoryURL": raw.get("repositoryURL") or raw.get("repository"),
        "laborHours": raw.get("laborHours"),
        "organization": raw.get("organization"),
        "agency": deepcopy(raw.get("agency")),
    }
    usage_code = get_usage_code(out, usage_codes, default_usage_code)
    out["repoID"] = build_repo_id(out, usage_code)
    return out


def format_v1_0_0(
    raw: Mapping[str, Any],
    *,
    usage_codes: Mapping[str, str] = DEFAULT_USAGE_CODES,
    default_usage_code: str = DEFAULT_USAGE_CODE,
) -> Dict[str, Any]:
    """Canonical record from a 1.0.0 project (no government-wide reuse flag)."""

    return _format_v1(
        raw, allow_reuse=False, usage_codes=usage_codes, default_usage_code=default_usage_code
    )


def format_v1_0_1(
    raw: Mapping[str, Any],
    *,
    usage_codes: Mapping[str, str] = DEFAULT_USAGE_CODES,
    default_usage_code: str = DEFAULT_USAGE_CODE,
) -> Dict[str, Any]:
    """Canonical record from a 1.0.1 project.

    Upgrades the older vocabulary: repository -> repositoryURL, license and
    the openSource/governmentWideReuse/exemption flags -> permissions.
    """

    return _format_v1(
        raw, allow_reuse=True, usage_codes=usage_codes, default_usage_code=default_usage_code
    )
