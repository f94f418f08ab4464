from .models import *
from typing import Any
from kubernetes import client

def get_service_name(service_name: str) -> str:
    return service_name

def get_service_host(config: TeleflixConfig, service_name: str) -> str:
    return f"{service_name}.{config.domain}"

def get_exposed_services(config: TeleflixConfig) -> list[tuple[str, ServiceConfig]]:
    """
        services that are both enabled and exposed, jellyfin first and the rest in declaration order.
        the certificate dns names and the ingress rules are both built from this list,
        so every host in one is also in the other.
    """
    return [(name, service) for name, service in config.services.items() if service.is_exposed()]

def create_service_manifests(args: ServiceManifestArguments) -> list[dict[str, Any]]:
    service = client.V1Service(
        api_version="v1",
        kind="Service",
        metadata=client.V1ObjectMeta(
            name=get_service_name(args.service_name),
            namespace=args.config.namespace,
            labels=args.service_labels,
        ),
        spec=client.V1ServiceSpec(
            selector={
                APP_SELECTOR_NAME: args.service_labels[APP_SELECTOR_NAME],
                COMPONENT_SELECTOR_NAME: args.service_labels[COMPONENT_SELECTOR_NAME],
            },
            ports=[client.V1ServicePort(
                protocol='TCP',
                port=args.service.port,
                target_port=args.service.port,
            )]
        )
    )
    return [client.ApiClient().sanitize_for_serialization(service)]
