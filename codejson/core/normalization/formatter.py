from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional

from codejson.config import FormatterConfig
from codejson.utils.dates import parse_date

from .schema import (
    SchemaFamily,
    classify_version,
    get_code_json_repos,
    get_code_json_version,
    validate_canonical_record,
)
from .usage import get_usage_code
from .v1_formatter import format_v1_0_0, format_v1_0_1
from .v2_formatter import format_v2_0_0

log = logging.getLogger("codejson.formatter")

RecordFormatter = Callable[..., Dict[str, Any]]

_FORMATTERS: Mapping[SchemaFamily, RecordFormatter] = {
    SchemaFamily.V1_0_0: format_v1_0_0,
    SchemaFamily.V1_0_1: format_v1_0_1,
    SchemaFamily.V2_0_0: format_v2_0_0,
}


@dataclass(frozen=True)
class FormatDispatch:
    """Outcome of selecting a record formatter."""

    family: SchemaFamily
    formatter_id: str


def select_formatter(schema_version: Any) -> FormatDispatch:
    """Select the record formatter for a schema version.

    Selection rules (deterministic):
    - 2, 2.x, 2.x.y -> "v2.0.0"
    - 1.0.1 and later 1.0.x -> "v1.0.1"
    - anything else -> "v1.0.0"
    """

    family = classify_version(schema_version)
    return FormatDispatch(family=family, formatter_id=f"v{family.value}")


class Formatter:
    """Turns raw catalog records into canonical repository records.

    The formatter holds configuration only; every call is independent and
    never mutates its input.
    """

    def __init__(self, config: Optional[FormatterConfig] = None) -> None:
        self.config = config or FormatterConfig()

    async def format_repo(self, schema_version: Any, repo: Mapping[str, Any]) -> Dict[str, Any]:
        """Awaitable wrapper around format_repo_sync; it never suspends."""

        return self.format_repo_sync(schema_version, repo)

    def format_repo_sync(self, schema_version: Any, repo: Mapping[str, Any]) -> Dict[str, Any]:
        dispatch = select_formatter(schema_version)
        formatted = _FORMATTERS[dispatch.family](
            repo,
            usage_codes=self.config.usage_codes,
            default_usage_code=self.config.default_usage_code,
        )
        validate_canonical_record(formatted)

        log.debug(
            "formatted repo %s with %s formatter", formatted["repoID"], dispatch.formatter_id
        )
        return formatted

    def format_catalog(self, code_json: Mapping[str, Any]) -> List[Dict[str, Any]]:
        """Format every repository record of a catalog document.

        Records without their own agency block inherit the catalog's.
        """

        version = get_code_json_version(code_json)
        repos = get_code_json_repos(code_json) or []
        agency = code_json.get("agency")

        out: List[Dict[str, Any]] = []
        for repo in repos:
            if not isinstance(repo, Mapping):
                log.warning("skipping non-object repository entry in %s catalog", version)
                continue
            if isinstance(agency, Mapping) and not isinstance(repo.get("agency"), Mapping):
                repo = {**repo, "agency": agency}
            out.append(self.format_repo_sync(version, repo))

        log.info("formatted %d of %d repositories (schema %s)", len(out), len(repos), version)
        return out

    def _format_date(self, date: Any = None) -> datetime:
        """Parse a date field; raises InvalidDateError when absent or invalid."""

        return parse_date(date)

    def _get_usage_code(self, repo: Mapping[str, Any]) -> str:
        return get_usage_code(repo, self.config.usage_codes, self.config.default_usage_code)
