from __future__ import annotations

import re
from enum import Enum
from typing import Any, List, Mapping, Optional

from codejson.errors import CanonicalShapeError
from codejson.utils.keys import transform_string_to_key


class SchemaFamily(str, Enum):
    """
    code.json schema variants a catalog can be written in.

    Using str Enum keeps the value usable as a plain version string.
    """

    V1_0_0 = "1.0.0"
    V1_0_1 = "1.0.1"
    V2_0_0 = "2.0.0"


V2_VERSION_RE = re.compile(r"^2(\.\d+){0,2}$")
V1_0_1_VERSION_RE = re.compile(r"^1\.0\.[1-9]\d*$")

CANONICAL_FIELDS = (
    "name",
    "description",
    "permissions",
    "tags",
    "contact",
    "repositoryURL",
    "laborHours",
    "organization",
    "agency",
    "repoID",
)


def is_v2_version(version: Any) -> bool:
    return isinstance(version, str) and V2_VERSION_RE.match(version) is not None


def classify_version(version: Any) -> SchemaFamily:
    """Map a version string to its schema family.

    Unknown or malformed versions fall back to V1_0_0 without raising.
    """

    if is_v2_version(version):
        return SchemaFamily.V2_0_0
    if isinstance(version, str) and V1_0_1_VERSION_RE.match(version):
        return SchemaFamily.V1_0_1
    return SchemaFamily.V1_0_0


def _present(value: Any) -> bool:
    # Empty objects and arrays still count as present.
    if isinstance(value, (Mapping, list, tuple)):
        return True
    return bool(value)


def get_code_json_version(code_json: Mapping[str, Any]) -> Any:
    """Schema version declared by a catalog, or inferred from its shape.

    - agency + projects -> "1.0.1"
    - agency + releases -> "2.0.0"
    - anything else -> "1.0.0"
    """

    if code_json.get("version"):
        return code_json["version"]
    if _present(code_json.get("agency")) and _present(code_json.get("projects")):
        return SchemaFamily.V1_0_1.value
    if _present(code_json.get("agency")) and _present(code_json.get("releases")):
        return SchemaFamily.V2_0_0.value
    return SchemaFamily.V1_0_0.value


def classify_document(code_json: Mapping[str, Any]) -> SchemaFamily:
    return classify_version(get_code_json_version(code_json))


def get_code_json_repos(code_json: Mapping[str, Any]) -> Optional[List[Any]]:
    """Repository records of a catalog: releases for 2.x, projects otherwise."""

    key = "releases" if is_v2_version(get_code_json_version(code_json)) else "projects"
    repos = code_json.get(key)
    return repos if _present(repos) else None


def build_repo_id(record: Mapping[str, Any], usage_code: str) -> str:
    """Stable id: <acronym>_<organization>_<usage code>_<name>, slugged.

    The organization stands in for the acronym when the record carries no
    agency block.
    """

    agency = record.get("agency")
    organization = record.get("organization")
    acronym = agency.get("acronym") if isinstance(agency, Mapping) else None

    parts = [acronym or organization, organization, usage_code, record.get("name")]
    return transform_string_to_key("_".join(str(p) for p in parts if p not in (None, "")))


def validate_canonical_record(record: Mapping[str, Any]) -> None:
    """Shape validator for formatted records.

    Raises CanonicalShapeError when the key set differs from CANONICAL_FIELDS.
    """

    if not isinstance(record, Mapping):
        raise CanonicalShapeError("record must be a mapping")

    keys = set(record.keys())
    expected = set(CANONICAL_FIELDS)
    missing = sorted(expected - keys)
    extra = sorted(keys - expected)
    if missing or extra:
        raise CanonicalShapeError(f"canonical key mismatch: missing={missing} extra={extra}")
    if not isinstance(record["repoID"], str) or not record["repoID"]:
        raise CanonicalShapeError("repoID must be a non-empty string")

