"""Secret type classification.

Maps the type tag of a Kubernetes secret (and, for opaque secrets, its
name) onto a SecretCategory.
"""

from kube_secrets.models import SecretCategory, SecretKind

# Helm release secrets are named sh.helm.release.v1.<release>.v<revision>
HELM_RELEASE_PREFIX = "sh.helm.release.v1."

_KIND_CATEGORIES: dict[str, SecretCategory] = {
    SecretKind.TLS.value: SecretCategory.TLS_CERTIFICATE,
    SecretKind.DOCKER_CONFIG_JSON.value: SecretCategory.DOCKER_CREDENTIAL,
    SecretKind.DOCKER_CFG.value: SecretCategory.DOCKER_CREDENTIAL,
    SecretKind.HELM_RELEASE.value: SecretCategory.HELM_RELEASE,
}

_KIND_LABELS: dict[str, str] = {
    SecretKind.OPAQUE.value: "opaque",
    SecretKind.TLS.value: "tls",
    SecretKind.DOCKER_CONFIG_JSON.value: "docker-registry",
    SecretKind.DOCKER_CFG.value: "docker-registry (legacy)",
    SecretKind.SERVICE_ACCOUNT_TOKEN.value: "service-account-token",
    SecretKind.BASIC_AUTH.value: "basic-auth",
    SecretKind.SSH_AUTH.value: "ssh-auth",
    SecretKind.BOOTSTRAP_TOKEN.value: "bootstrap-token",
    SecretKind.HELM_RELEASE.value: "helm-release",
}


def classify(kind: str, name: str) -> SecretCategory:
    """Classify a secret by its type tag and name.

    The type tag decides first; the name is only consulted for opaque
    secrets, so a Helm-looking name on e.g. a TLS secret is still
    classified by its kind.

    Args:
        kind: The secret type tag.
        name: The secret name.

    Returns:
        The category of the secret. Unknown kinds map to OTHER.

    """
    category = _KIND_CATEGORIES.get(kind)
    if category is not None:
        return category

    if kind == SecretKind.OPAQUE.value and name.startswith(HELM_RELEASE_PREFIX):
        return SecretCategory.HELM_RELEASE

    return SecretCategory.OTHER


def describe_kind(kind: str) -> str:
    """Return a human readable label for a secret type tag.

    Args:
        kind: The secret type tag.

    Returns:
        A short label, or the tag itself for unknown kinds.

    """
    return _KIND_LABELS.get(kind, kind)
