"""String, URL, date and collection helpers for catalog records.

All helpers are pure: inputs are never mutated and nothing is fetched.
"""

from .collection_ops import omit_deep_keys, omit_private_keys, remove_dupes
from .dates import is_last_day_of_month, parse_date
from .keys import latinize, strip_bom, transform_string_to_key
from .urls import (
    GithubRepoRef,
    is_valid_email,
    is_valid_repository_url,
    is_valid_url,
    parse_github_url,
)

__all__ = [
    "omit_deep_keys",
    "omit_private_keys",
    "remove_dupes",
    "is_last_day_of_month",
    "parse_date",
    "latinize",
    "strip_bom",
    "transform_string_to_key",
    "GithubRepoRef",
    "is_valid_email",
    "is_valid_repository_url",
    "is_valid_url",
    "parse_github_url",
]
