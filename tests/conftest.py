"""Shared test fixtures for kube-secrets tests."""

from unittest.mock import MagicMock, patch

import pytest

from kube_secrets.models import SecretRecord


def _secret(name: str, kind: str | None) -> MagicMock:
    secret = MagicMock()
    secret.metadata.name = name
    secret.type = kind
    return secret


@pytest.fixture
def make_secret():
    """Factory for mock V1Secret objects."""
    return _secret


@pytest.fixture
def mock_kube_contexts():
    """Mock kubernetes config contexts."""
    with patch("kubernetes.config.list_kube_config_contexts") as mock:
        mock.return_value = (
            [{"name": "test-context"}, {"name": "staging"}],
            {"name": "test-context"},
        )
        yield mock


@pytest.fixture
def mock_kube_config():
    """Mock kubernetes config loading."""
    with patch("kubernetes.config.load_kube_config") as mock:
        yield mock


@pytest.fixture
def mock_core_v1_api():
    """Mock CoreV1Api with an existing, empty namespace."""
    with patch("kubernetes.client.CoreV1Api") as mock:
        api_instance = MagicMock()
        mock.return_value = api_instance
        api_instance.list_namespaced_secret.return_value.items = []
        yield api_instance


@pytest.fixture
def cluster_mocks(mock_kube_contexts, mock_kube_config, mock_core_v1_api):
    """Combined fixture for creating a Cluster instance without cluster access."""
    return {
        "contexts": mock_kube_contexts,
        "config": mock_kube_config,
        "core_api": mock_core_v1_api,
    }


@pytest.fixture
def fakespace_secrets(make_secret):
    """Secrets of a namespace with one interesting secret among noisy ones."""
    return [
        make_secret("site-tls", "kubernetes.io/tls"),
        make_secret("registry-cred", "kubernetes.io/dockerconfigjson"),
        make_secret("app-token", "Opaque"),
    ]


@pytest.fixture
def sample_records():
    """A mixed, unsorted namespace listing."""
    return [
        SecretRecord(name="zeta-config", kind="Opaque"),
        SecretRecord(name="site-tls", kind="kubernetes.io/tls"),
        SecretRecord(name="db-password", kind="Opaque"),
        SecretRecord(name="registry-cred", kind="kubernetes.io/dockerconfigjson"),
        SecretRecord(name="sh.helm.release.v1.myapp.v1", kind="Opaque"),
        SecretRecord(name="default-token-abcde", kind="kubernetes.io/service-account-token"),
        SecretRecord(name="api-token", kind="Opaque"),
    ]
