from __future__ import annotations

import json
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from codejson.errors import ConfigurationError

DEFAULT_WEIGHTS_FILE = Path(__file__).resolve().parent / "field_weights.json"
FIELD_WEIGHTS_ENV = "CODEJSON_FIELD_WEIGHTS_FILE"

Number = Union[int, float]


@dataclass(frozen=True)
class FieldWeights:
    """Immutable field -> weight table.

    The table is loaded once and wrapped in a MappingProxyType, so callers
    share it without being able to mutate it.
    """

    weights: Mapping[str, Number]

    def __post_init__(self) -> None:
        clean = {}
        for k, v in dict(self.weights).items():
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                raise ConfigurationError(f"weight for {k!r} must be numeric")
            clean[str(k)] = v
        object.__setattr__(self, "weights", MappingProxyType(clean))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "FieldWeights":
        p = Path(path)
        try:
            data: Any = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ConfigurationError(f"cannot load field weights from {p}: {exc}") from exc
        if not isinstance(data, Mapping):
            raise ConfigurationError("field weight table must be a JSON object")
        return cls(weights=data)

    @classmethod
    def default(cls) -> "FieldWeights":
        """Table named by CODEJSON_FIELD_WEIGHTS_FILE, else the bundled one."""

        raw = os.environ.get(FIELD_WEIGHTS_ENV, "").strip()
        return _cached_weights(Path(raw) if raw else DEFAULT_WEIGHTS_FILE)

    def weight(self, field: str) -> Number:
        return self.weights.get(field) or 0

    def max_total(self) -> Number:
        return sum(self.weights.values())


@lru_cache(maxsize=8)
def _cached_weights(path: Path) -> FieldWeights:
    return FieldWeights.from_file(path)


def get_field_weight(field: str, weights: Optional[FieldWeights] = None) -> Number:
    """Weight of a field; unknown fields weigh 0."""

    return (weights or FieldWeights.default()).weight(field)


def get_max_total_weight(weights: Optional[FieldWeights] = None) -> Number:
    return (weights or FieldWeights.default()).max_total()


def get_score(target: Mapping[str, Any], value: Number) -> Number:
    """Add value to target's running score, or start one.

    A missing or zero score starts over at value.
    """

    current = target.get("score") if isinstance(target, Mapping) else None
    return current + value if current else value
