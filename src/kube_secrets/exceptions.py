"""Custom exceptions for kube-secrets.

This module defines the exception hierarchy used to report failures
while retrieving secrets from the cluster.
"""


class SecretsError(Exception):
    """Base exception for all kube-secrets errors.

    All custom exceptions in this package inherit from this class,
    allowing callers to catch all kube-secrets errors with a single
    except clause if desired.
    """

    pass


class FetchError(SecretsError):
    """Raised when the secrets of a namespace cannot be retrieved."""

    pass


class NamespaceNotFoundError(FetchError):
    """Raised when the requested namespace does not exist in the cluster.

    Attributes:
        namespace: The namespace that could not be found.

    """

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(f"Namespace '{namespace}' not found")


class TransportError(FetchError):
    """Raised when talking to the Kubernetes API fails.

    This can occur when:
    - The cluster is unreachable
    - Authentication fails
    - The user doesn't have permission to list secrets
    """

    pass


class ClusterConnectionError(TransportError):
    """Raised when the cluster connection cannot be configured.

    This can occur when:
    - The kubeconfig is invalid or missing
    - The requested context does not exist in the kubeconfig
    """

    pass
