"""Single fetch, filter and render cycle.

This module ties the cluster fetcher, the filtering pipeline and the
console renderer together for one invocation.
"""

from icecream import ic
from rich.markup import escape

from kube_secrets import console
from kube_secrets.cluster import Cluster
from kube_secrets.exceptions import NamespaceNotFoundError, TransportError
from kube_secrets.models import ExitOutcome, FilterRequest
from kube_secrets.secrets.filtering import filter_secrets


def run(cluster: Cluster, request: FilterRequest) -> ExitOutcome:
    """List, filter and print the secrets of a namespace.

    Either the filtered listing or an error is printed, never both.
    Failures are reported once and not retried.

    Args:
        cluster: Fetcher used to list the namespace.
        request: Namespace, query and suppression settings.

    Returns:
        The outcome to exit the process with.

    """
    ic(request)

    if request.show_all:
        console.info("Showing all secret types")

    try:
        with console.spinner(f"Fetching secrets from namespace {escape(request.namespace)}..."):
            records = cluster.list_secrets(request.namespace)
    except NamespaceNotFoundError as e:
        console.error(
            f"Namespace '{escape(e.namespace)}' does not exist. Maybe you're looking at the wrong cluster?"
        )
        return ExitOutcome.NAMESPACE_NOT_FOUND
    except TransportError as e:
        namespace = escape(request.namespace)
        console.error(f"Unable to retrieve secrets from namespace '{namespace}': {escape(str(e))}")
        return ExitOutcome.FETCH_FAILED

    results = filter_secrets(records, request.substring, suppressed=request.suppressed)
    ic(len(records), len(results))

    console.render_secrets(results, namespace=request.namespace, total=len(records), query=request.substring)
    return ExitOutcome.SUCCESS
