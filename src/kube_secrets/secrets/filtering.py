"""Filtering of namespace secret listings."""

from collections.abc import Iterable

from kube_secrets.models import DEFAULT_SUPPRESSED, FilterResult, SecretCategory, SecretRecord
from kube_secrets.secrets.classification import classify


def matches_substring(name: str, substring: str | None) -> bool:
    """Check a secret name against an optional query.

    An absent or empty query matches every name. Matching is a
    case-sensitive containment test.

    Args:
        name: The secret name.
        substring: The query to look for.

    Returns:
        True if the name should be kept.

    """
    if not substring:
        return True
    return substring in name


def filter_secrets(
    records: Iterable[SecretRecord],
    substring: str | None = None,
    suppressed: frozenset[SecretCategory] = DEFAULT_SUPPRESSED,
) -> FilterResult:
    """Drop noisy and non-matching secrets and sort the rest by name.

    Args:
        records: Secrets listed in a namespace.
        substring: Optional case-sensitive name filter.
        suppressed: Categories to exclude.

    Returns:
        The surviving records ordered by name.

    """
    kept = [
        record
        for record in records
        if classify(record.kind, record.name) not in suppressed and matches_substring(record.name, substring)
    ]
    return tuple(sorted(kept, key=lambda record: record.name))
