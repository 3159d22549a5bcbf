"""Data models for kube-secrets.

This module provides the typed records passed between the cluster
fetcher, the classification pipeline and the console renderer.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import NamedTuple


class SecretKind(str, Enum):
    """Well-known Kubernetes secret types.

    Inherits from str so members compare equal to the raw ``type``
    field returned by the API server.
    """

    OPAQUE = "Opaque"
    TLS = "kubernetes.io/tls"
    DOCKER_CONFIG_JSON = "kubernetes.io/dockerconfigjson"
    DOCKER_CFG = "kubernetes.io/dockercfg"
    SERVICE_ACCOUNT_TOKEN = "kubernetes.io/service-account-token"
    BASIC_AUTH = "kubernetes.io/basic-auth"
    SSH_AUTH = "kubernetes.io/ssh-auth"
    BOOTSTRAP_TOKEN = "bootstrap.kubernetes.io/token"
    HELM_RELEASE = "helm.sh/release.v1"


class SecretCategory(str, Enum):
    """Semantic category a secret is classified into."""

    TLS_CERTIFICATE = "tls-certificate"
    DOCKER_CREDENTIAL = "docker-credential"
    HELM_RELEASE = "helm-release"
    OTHER = "other"


# Categories hidden unless --show-all is given
DEFAULT_SUPPRESSED: frozenset[SecretCategory] = frozenset(
    {
        SecretCategory.TLS_CERTIFICATE,
        SecretCategory.DOCKER_CREDENTIAL,
        SecretCategory.HELM_RELEASE,
    }
)


class SecretRecord(NamedTuple):
    """A secret as listed in a namespace.

    Only the metadata needed for classification is kept, the secret
    payload is never read.

    Attributes:
        name: The secret name, unique within its namespace.
        kind: The secret type tag (e.g. 'Opaque', 'kubernetes.io/tls').

    """

    name: str
    kind: str


FilterResult = tuple[SecretRecord, ...]


class ExitOutcome(IntEnum):
    """Process exit codes for a single invocation."""

    SUCCESS = 0
    NAMESPACE_NOT_FOUND = 1
    FETCH_FAILED = 2


@dataclass(frozen=True, slots=True)
class FilterRequest:
    """Validated input for one invocation.

    Attributes:
        namespace: The namespace to inspect.
        substring: Optional case-sensitive name filter.
        show_all: Disable category suppression.

    """

    namespace: str
    substring: str | None = None
    show_all: bool = False

    @property
    def suppressed(self) -> frozenset[SecretCategory]:
        """Categories excluded from the output for this request."""
        if self.show_all:
            return frozenset()
        return DEFAULT_SUPPRESSED


@dataclass(frozen=True, slots=True)
class ClusterConfig:
    """Connection settings for the Kubernetes API.

    Attributes:
        kubeconfig: Path to the kubeconfig file, or None for the default location.
        context: Context name to use, or None for the current context.
        select_context: Prompt for the context interactively.

    """

    kubeconfig: str | None = None
    context: str | None = None
    select_context: bool = False
