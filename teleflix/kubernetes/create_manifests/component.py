from .models import *
from .deployment import create_deployment_manifests
from .service import create_service_manifests
from typing import Any

def get_service_manifest_key(index: int, service_name: str) -> str:
    return f"{index:02d}-{service_name}"

def create_component_manifests(args: ManifestArguments, service_name: str, service: ServiceConfig) -> list[dict[str, Any]]:
    """dedicated claims, deployment and service of one enabled service"""
    component_args = ServiceManifestArguments(
        config=args.config,
        service_name=service_name,
        service=service,
        service_labels=args.service_labels_factory(service_name),
    )
    manifests = []
    manifests += create_deployment_manifests(component_args)
    manifests += create_service_manifests(component_args)
    return manifests
