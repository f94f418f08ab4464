from .models import ManifestArguments
from typing import Any
from kubernetes import client

def create_namespace_manifests(args: ManifestArguments) -> list[dict[str, Any]]:
    ns = client.V1Namespace(
        api_version="v1",
        kind="Namespace",
        metadata=client.V1ObjectMeta(
            name=args.config.namespace,
        ),
    )
    return [client.ApiClient().sanitize_for_serialization(ns)] # type: ignore[no-any-return]
