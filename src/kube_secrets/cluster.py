"""Kubernetes cluster interaction utilities.

This module provides the Cluster class which resolves the kubeconfig
context to use and lists the secrets of a namespace.
"""

import click
import questionary
from icecream import ic
from kubernetes import client, config
from kubernetes.client.exceptions import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import MaxRetryError

from kube_secrets import console
from kube_secrets.exceptions import ClusterConnectionError, NamespaceNotFoundError, TransportError
from kube_secrets.models import ClusterConfig, SecretKind, SecretRecord
from kube_secrets.styles import POINTER, PROMPT_STYLE, QMARK


class Cluster:
    """Read-only access to the secrets of a Kubernetes cluster.

    Attributes:
        cluster_config: The connection settings the cluster was built from.
        context: The active Kubernetes context name.
        api: The CoreV1Api client bound to that context.

    """

    def __init__(self, cluster_config: ClusterConfig) -> None:
        """Initialize Cluster from explicit connection settings.

        Args:
            cluster_config: Kubeconfig location and context selection.

        Raises:
            ClusterConnectionError: If the kubeconfig cannot be loaded.

        """
        self.cluster_config: ClusterConfig = cluster_config
        self.context: str = self._set_context(cluster_config)
        try:
            config.load_kube_config(config_file=cluster_config.kubeconfig, context=self.context)
        except ConfigException as e:
            raise ClusterConnectionError(f"Unable to load context '{self.context}': {e}") from e
        self.api = client.CoreV1Api()

    @staticmethod
    def _set_context(cluster_config: ClusterConfig) -> str:
        """Resolve the Kubernetes context to use.

        An explicit context wins over interactive selection, which wins
        over the current context.

        Args:
            cluster_config: Kubeconfig location and context selection.

        Returns:
            The selected context name.

        Raises:
            ClusterConnectionError: If kubeconfig is invalid or missing, or
                the requested context does not exist.
            click.Abort: If user cancels context selection.

        """
        try:
            contexts, current_context = config.list_kube_config_contexts(config_file=cluster_config.kubeconfig)
        except ConfigException as e:
            raise ClusterConnectionError(f"Invalid or missing kubeconfig: {e}") from e

        context_names: list[str] = [context["name"] for context in contexts]
        ic(context_names)

        if cluster_config.context is not None:
            if cluster_config.context not in context_names:
                raise ClusterConnectionError(f"Context '{cluster_config.context}' not found in kubeconfig")
            context = cluster_config.context
        elif cluster_config.select_context:
            selected: str | None = questionary.select(
                "Select context to work with",
                choices=context_names,
                style=PROMPT_STYLE,
                pointer=POINTER,
                qmark=QMARK,
            ).ask()
            if selected is None:
                console.warning("Context selection cancelled.")
                raise click.Abort()
            context = selected
        else:
            if not current_context:
                raise ClusterConnectionError("No current context set in kubeconfig")
            context = str(current_context["name"])

        console.action(f"Working with {console.highlight(context)} cluster")
        return context

    def list_secrets(self, namespace: str) -> list[SecretRecord]:
        """List the secrets of a namespace.

        A missing namespace lists as empty on the API server, so an empty
        listing is followed by a namespace lookup to tell the two apart.

        Args:
            namespace: The namespace to list.

        Returns:
            The name and type of every secret in the namespace.

        Raises:
            NamespaceNotFoundError: If the namespace does not exist.
            TransportError: If the API server cannot be reached or refuses
                the request.

        """
        try:
            items = self.api.list_namespaced_secret(namespace).items
        except ApiException as e:
            if e.status == 404:
                raise NamespaceNotFoundError(namespace) from e
            raise TransportError(f"Failed to list secrets: {e.status} {e.reason}") from e
        except MaxRetryError as e:
            raise TransportError(f"Failed to connect to the Kubernetes cluster: {e.reason}") from e

        # An unset type is reported as Opaque by kubectl
        records = [SecretRecord(name=item.metadata.name, kind=item.type or SecretKind.OPAQUE.value) for item in items]
        ic(records)

        if not records:
            self._ensure_namespace_exists(namespace)

        return records

    def _ensure_namespace_exists(self, namespace: str) -> None:
        """Check that a namespace exists.

        Args:
            namespace: The namespace to look up.

        Raises:
            NamespaceNotFoundError: If the namespace does not exist.
            TransportError: If the lookup itself fails. A forbidden lookup
                is not an error, the namespace is assumed to exist.

        """
        try:
            self.api.read_namespace(namespace)
        except ApiException as e:
            if e.status == 404:
                raise NamespaceNotFoundError(namespace) from e
            if e.status == 403:
                # Namespace-scoped credentials may list secrets without reading namespaces
                ic(e.status, namespace)
                return
            raise TransportError(f"Failed to look up namespace '{namespace}': {e.status} {e.reason}") from e
        except MaxRetryError as e:
            raise TransportError(f"Failed to connect to the Kubernetes cluster: {e.reason}") from e

    def __repr__(self) -> str:
        """Return a detailed string representation for debugging."""
        return f"Cluster(context={self.context!r})"
