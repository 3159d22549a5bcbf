"""Tests for runner.py module."""

from unittest.mock import MagicMock, patch

import pytest

from kube_secrets.exceptions import NamespaceNotFoundError, TransportError
from kube_secrets.models import ExitOutcome, FilterRequest, SecretRecord
from kube_secrets.runner import run


@pytest.fixture
def cluster():
    """Mock fetcher returning a small namespace listing."""
    mock = MagicMock()
    mock.list_secrets.return_value = [
        SecretRecord("site-tls", "kubernetes.io/tls"),
        SecretRecord("registry-cred", "kubernetes.io/dockerconfigjson"),
        SecretRecord("app-token", "Opaque"),
    ]
    return mock


@pytest.fixture
def mock_console():
    """Mock console module used by the runner."""
    with patch("kube_secrets.runner.console") as mock:
        yield mock


class TestRun:
    """Tests for a single fetch, filter and render cycle."""

    def test_success_renders_filtered(self, cluster, mock_console):
        """Test the filtered listing is rendered."""
        outcome = run(cluster, FilterRequest(namespace="fakespace"))

        assert outcome is ExitOutcome.SUCCESS
        cluster.list_secrets.assert_called_once_with("fakespace")
        mock_console.render_secrets.assert_called_once_with(
            (SecretRecord("app-token", "Opaque"),), namespace="fakespace", total=3, query=None
        )
        mock_console.error.assert_not_called()

    def test_show_all_renders_everything(self, cluster, mock_console):
        """Test show_all disables suppression."""
        run(cluster, FilterRequest(namespace="fakespace", show_all=True))

        results = mock_console.render_secrets.call_args[0][0]
        assert [record.name for record in results] == ["app-token", "registry-cred", "site-tls"]

    def test_namespace_not_found(self, cluster, mock_console):
        """Test a missing namespace is reported by name and nothing is rendered."""
        cluster.list_secrets.side_effect = NamespaceNotFoundError("bob")

        with patch("kube_secrets.runner.filter_secrets") as mock_filter:
            outcome = run(cluster, FilterRequest(namespace="bob"))

            mock_filter.assert_not_called()

        assert outcome is ExitOutcome.NAMESPACE_NOT_FOUND
        message = mock_console.error.call_args[0][0]
        assert "'bob'" in message
        assert "does not exist" in message
        mock_console.render_secrets.assert_not_called()

    def test_transport_error(self, cluster, mock_console):
        """Test other failures surface their cause and are not retried."""
        cluster.list_secrets.side_effect = TransportError("Failed to list secrets: 403 Forbidden")

        outcome = run(cluster, FilterRequest(namespace="default"))

        assert outcome is ExitOutcome.FETCH_FAILED
        assert "403 Forbidden" in mock_console.error.call_args[0][0]
        cluster.list_secrets.assert_called_once()
        mock_console.render_secrets.assert_not_called()
