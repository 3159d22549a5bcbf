"""kube-secrets: List the secrets of a Kubernetes namespace that matter.

This package lists the secrets of a namespace, hides the noisy ones
(TLS certificates, registry credentials and Helm release state) and
prints the rest.

Example usage:
    from kube_secrets import Cluster, ClusterConfig, filter_secrets

    cluster = Cluster(ClusterConfig())
    for secret in filter_secrets(cluster.list_secrets("default"), "token"):
        print(secret.name, secret.kind)
"""

__version__ = "0.2.0"

from kube_secrets.cli import cli
from kube_secrets.cluster import Cluster
from kube_secrets.exceptions import (
    ClusterConnectionError,
    FetchError,
    NamespaceNotFoundError,
    SecretsError,
    TransportError,
)
from kube_secrets.models import (
    DEFAULT_SUPPRESSED,
    ClusterConfig,
    ExitOutcome,
    FilterRequest,
    SecretCategory,
    SecretKind,
    SecretRecord,
)
from kube_secrets.runner import run
from kube_secrets.secrets import classify, describe_kind, filter_secrets

__all__ = [
    # Version
    "__version__",
    # Main CLI
    "cli",
    "run",
    # Classes
    "Cluster",
    # Pipeline
    "classify",
    "describe_kind",
    "filter_secrets",
    # Models
    "DEFAULT_SUPPRESSED",
    "ClusterConfig",
    "ExitOutcome",
    "FilterRequest",
    "SecretCategory",
    "SecretKind",
    "SecretRecord",
    # Exceptions
    "SecretsError",
    "FetchError",
    "NamespaceNotFoundError",
    "TransportError",
    "ClusterConnectionError",
]
