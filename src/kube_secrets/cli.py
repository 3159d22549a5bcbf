#!/usr/bin/env python
"""Command-line interface for kube-secrets.

This module provides the ``secrets`` entry point, which parses the
command line, builds the cluster configuration and runs one listing.
"""

import sys

import click
from icecream import ic
from rich.markup import escape

from kube_secrets import __version__, console
from kube_secrets.cluster import Cluster
from kube_secrets.exceptions import ClusterConnectionError
from kube_secrets.models import ClusterConfig, ExitOutcome, FilterRequest
from kube_secrets.runner import run


@click.command(
    help="Command line utility to list the secrets of a Kubernetes namespace",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, "--version", "-V", prog_name="secrets")
@click.option("--show-all", "-a", required=False, is_flag=True, help="include TLS, registry and Helm release secrets")
@click.option("--context", required=False, help="kubeconfig context to use")
@click.option("--kubeconfig", required=False, type=click.Path(dir_okay=False), help="path to the kubeconfig file")
@click.option("--select", required=False, is_flag=True, default=False, help="prompt for context select")
@click.option("--debug", required=False, is_flag=True, help="print debug information")
@click.argument("namespace")
@click.argument("query", required=False)
def cli(
    namespace: str,
    query: str | None,
    show_all: bool,
    context: str | None,
    kubeconfig: str | None,
    select: bool,
    debug: bool,
) -> None:
    """List the secrets of NAMESPACE whose name contains QUERY.

    Args:
        namespace: Namespace to inspect.
        query: Optional case-sensitive name filter.
        show_all: Disable suppression of noisy secret types.
        context: Kubeconfig context to use.
        kubeconfig: Path to the kubeconfig file.
        select: Prompt for Kubernetes context selection.
        debug: Enable debug output.

    """
    if not debug:
        ic.disable()

    cluster_config = ClusterConfig(kubeconfig=kubeconfig, context=context, select_context=select)
    request = FilterRequest(namespace=namespace, substring=query, show_all=show_all)
    ic(cluster_config)

    try:
        cluster = Cluster(cluster_config)
    except ClusterConnectionError as e:
        console.error(f"Cluster connection failed: {escape(str(e))}")
        sys.exit(1)

    outcome = run(cluster, request)
    if outcome is not ExitOutcome.SUCCESS:
        sys.exit(int(outcome))


if __name__ == "__main__":
    cli()
