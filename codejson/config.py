from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from codejson.core.scoring.weights import FieldWeights
from codejson.errors import ConfigurationError

log = logging.getLogger("codejson.config")

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

# permissions.usageType -> single-character usage code
DEFAULT_USAGE_CODES: Mapping[str, str] = MappingProxyType(
    {
        "openSource": "1",
        "governmentWideReuse": "2",
        "exemptByLaw": "3",
        "exemptByNationalSecurity": "4",
        "exemptByAgencySystem": "5",
        "exemptByAgencyMission": "6",
        "exemptByCIO": "7",
        "exemptByPolicyDate": "8",
    }
)
DEFAULT_USAGE_CODE: str = "0"


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Configuration for the catalog formatter.

    Usage codes and field weights are data, not logic: both can be replaced
    by JSON files named through environment variables.

    """

    log_level: str = "INFO"
    usage_codes: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_USAGE_CODES))
    )
    default_usage_code: str = DEFAULT_USAGE_CODE
    field_weights_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "FormatterConfig":
        """Build a config from CODEJSON_* environment variables."""

        usage_codes: Mapping[str, str] = DEFAULT_USAGE_CODES
        usage_path = _env_path("CODEJSON_USAGE_CODES_FILE")
        if usage_path is not None:
            usage_codes = _load_usage_codes(usage_path)

        return cls(
            log_level=_env_log_level("CODEJSON_LOG_LEVEL", "INFO"),
            usage_codes=MappingProxyType(dict(usage_codes)),
            default_usage_code=os.environ.get("CODEJSON_DEFAULT_USAGE_CODE", "").strip()
            or DEFAULT_USAGE_CODE,
            field_weights_file=_env_path("CODEJSON_FIELD_WEIGHTS_FILE"),
        )

    def apply_logging(self) -> None:
        """Set the package logger level. Handlers are left to the host app."""

        logging.getLogger("codejson").setLevel(self.log_level)

    def load_field_weights(self) -> FieldWeights:
        if self.field_weights_file is None:
            return FieldWeights.default()
        return FieldWeights.from_file(self.field_weights_file)


def _env_path(name: str) -> Optional[Path]:
    raw = os.environ.get(name, "").strip()
    return Path(raw) if raw else None


def _env_log_level(name: str, default: str) -> str:
    raw = os.environ.get(name, "").strip().upper()
    if not raw:
        return default
    if raw not in _LOG_LEVELS:
        log.warning("ignoring unknown log level %r from %s", raw, name)
        return default
    return raw


def _load_usage_codes(path: Path) -> Mapping[str, str]:
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"cannot load usage codes from {path}: {exc}") from exc

    if not isinstance(data, Mapping):
        raise ConfigurationError("usage code table must be a JSON object")
    for k, v in data.items():
        if not isinstance(v, str) or len(v) != 1:
            raise ConfigurationError(f"usage code for {k!r} must be a single character")
    return {str(k): v for k, v in data.items()}
