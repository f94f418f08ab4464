from .models import *
from .app import get_service_labels_factory
from .namespace import create_namespace_manifests
from .storage import create_storage_manifests
from .cert_manager import create_cert_manager_manifests
from .component import create_component_manifests, get_service_manifest_key
from .ingress import create_ingress_manifests
from ...lib.errors import ConfigurationError
from ...lib.yaml_tools import dump_documents

from typing import Any


def create_manifest_documents(config: TeleflixConfig) -> dict[str, list[dict[str, Any]]]:
    """
        builds every api object, grouped by manifest key in apply order.
        raises on the first error, so the caller gets either all of the manifests or none.
    """
    args = ManifestArguments(
        config=config,
        service_labels_factory=get_service_labels_factory(),
    )
    documents: dict[str, list[dict[str, Any]]] = {}
    documents[NAMESPACE_MANIFEST_KEY] = create_namespace_manifests(args)
    documents[STORAGE_MANIFEST_KEY] = create_storage_manifests(args)

    if config.cert_manager.enabled:
        documents[CERT_MANAGER_MANIFEST_KEY] = create_cert_manager_manifests(args)

    index = FIRST_SERVICE_MANIFEST_INDEX
    for service_name, service in config.services.items():
        if not service.enabled:
            continue
        key = get_service_manifest_key(index, service_name)
        try:
            documents[key] = create_component_manifests(args, service_name, service)
        except ConfigurationError as e:
            raise ConfigurationError(f"{key}: {e}") from e
        index += 1

    if config.ingress.enabled:
        ingress_manifests = create_ingress_manifests(args)
        if ingress_manifests:
            documents[INGRESS_MANIFEST_KEY] = ingress_manifests

    return documents

def render_manifests(documents: dict[str, list[dict[str, Any]]]) -> dict[str, str]:
    return { key: dump_documents(manifests) for key, manifests in documents.items() }

def create_manifests(config: TeleflixConfig) -> dict[str, str]:
    return render_manifests(create_manifest_documents(config))
