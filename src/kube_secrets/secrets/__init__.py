"""Secret classification and filtering.

This package turns the raw secret listing of a namespace into the
sorted, noise-free result shown to the user.
"""

from kube_secrets.secrets.classification import classify, describe_kind
from kube_secrets.secrets.filtering import filter_secrets, matches_substring

__all__ = [
    "classify",
    "describe_kind",
    "filter_secrets",
    "matches_substring",
]
