from .models import *
from .service import get_exposed_services, get_service_host, get_service_name
from typing import Any
from kubernetes import client

HTTPS_REDIRECT_ANNOTATIONS = {
    'traefik': {
        'traefik.ingress.kubernetes.io/redirect-to-https': 'true',
    },
    'nginx': {
        'nginx.ingress.kubernetes.io/ssl-redirect': 'true',
        'nginx.ingress.kubernetes.io/force-ssl-redirect': 'true',
    },
}

def get_ingress_annotations(config: TeleflixConfig) -> dict[str, str]:
    ingress_annotations = dict(config.ingress.annotations or {})

    if config.ingress.tls.enabled and config.cert_manager.enabled:
        # the certificate is managed explicitly, so no cert-manager.io/cluster-issuer here
        redirect_annotations = HTTPS_REDIRECT_ANNOTATIONS.get(config.ingress.class_name, {})
        for key, value in redirect_annotations.items():
            ingress_annotations.setdefault(key, value)

    return ingress_annotations

def create_ingress_rule(config: TeleflixConfig, service_name: str, service: ServiceConfig) -> client.V1IngressRule:
    return client.V1IngressRule(
        host=get_service_host(config, service_name),
        http=client.V1HTTPIngressRuleValue(
            paths=[client.V1HTTPIngressPath(
                path="/",
                path_type="Prefix",
                backend=client.V1IngressBackend(
                    service=client.V1IngressServiceBackend(
                        name=get_service_name(service_name),
                        port=client.V1ServiceBackendPort(
                            number=service.port
                        )
                    )
                )
            )]
        )
    )

def create_ingress_manifests(args: ManifestArguments) -> list[dict[str, Any]]:
    config = args.config
    rules = [create_ingress_rule(config, name, service) for name, service in get_exposed_services(config)]

    # nothing is exposed, an ingress without rules is invalid
    if not rules:
        return []

    ingress = client.V1Ingress(
        api_version="networking.k8s.io/v1",
        kind="Ingress",
        metadata=client.V1ObjectMeta(
            name=INGRESS_NAME,
            namespace=config.namespace,
            annotations=get_ingress_annotations(config) or None
        ),
        spec=client.V1IngressSpec(
            ingress_class_name=config.ingress.class_name,
            rules=rules
        )
    )

    if config.ingress.tls.enabled:
        # make the compiler happy
        assert ingress.spec is not None
        ingress.spec.tls = [client.V1IngressTLS(
            hosts=[rule.host for rule in rules],
            secret_name=config.ingress.tls.secret_name
        )]

    return [client.ApiClient().sanitize_for_serialization(ingress)]
