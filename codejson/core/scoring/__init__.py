"""Field weighting used to score how complete a repository record is."""

from .weights import FieldWeights, get_field_weight, get_max_total_weight, get_score

__all__ = [
    "FieldWeights",
    "get_field_weight",
    "get_max_total_weight",
    "get_score",
]
