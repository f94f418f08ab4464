from .models import *
from .service import get_exposed_services, get_service_host
from ...lib.errors import ConfigurationError
from dataclasses import dataclass
from typing import Any

ISSUER_TYPE_LETSENCRYPT = 'letsencrypt'
ISSUER_TYPE_SELFSIGNED = 'selfsigned'

@dataclass(frozen=True)
class AcmeIssuer:
    name: str
    email: str
    solver_ingress_class: str
    server: str = LETSENCRYPT_PRODUCTION_SERVER

    def private_key_secret_name(self) -> str:
        return f"{self.name}-key"

@dataclass(frozen=True)
class SelfSignedIssuer:
    name: str

Issuer = AcmeIssuer | SelfSignedIssuer

def resolve_issuer(config: TeleflixConfig) -> Issuer:
    issuer = config.cert_manager.issuer
    if issuer.type == ISSUER_TYPE_LETSENCRYPT:
        if not issuer.email:
            raise ConfigurationError(f"An email is required for the Let's Encrypt issuer '{issuer.name}'")
        return AcmeIssuer(
            name=issuer.name,
            email=issuer.email,
            solver_ingress_class=config.ingress.class_name,
        )
    if issuer.type == ISSUER_TYPE_SELFSIGNED:
        return SelfSignedIssuer(name=issuer.name)
    raise ConfigurationError(f"Unsupported issuer type: '{issuer.type}' "
        f"(expected '{ISSUER_TYPE_LETSENCRYPT}' or '{ISSUER_TYPE_SELFSIGNED}')")

def create_cluster_issuer_manifest(issuer: Issuer) -> dict[str, Any]:
    if isinstance(issuer, AcmeIssuer):
        spec = {
            'acme': {
                'server': issuer.server,
                'email': issuer.email,
                'privateKeySecretRef': {
                    'name': issuer.private_key_secret_name(),
                },
                'solvers': [{
                    'http01': {
                        'ingress': {
                            'class': issuer.solver_ingress_class,
                        }
                    }
                }]
            }
        }
    else:
        spec = { 'selfSigned': {} }

    return {
        'apiVersion': CERT_MANAGER_API_VERSION,
        'kind': 'ClusterIssuer',
        'metadata': {
            'name': issuer.name,
        },
        'spec': spec,
    }

def get_certificate_dns_names(config: TeleflixConfig) -> list[str]:
    return [get_service_host(config, name) for name, _ in get_exposed_services(config)]

def create_certificate_manifest(config: TeleflixConfig, issuer: Issuer, dns_names: list[str]) -> dict[str, Any]:
    return {
        'apiVersion': CERT_MANAGER_API_VERSION,
        'kind': 'Certificate',
        'metadata': {
            'name': CERTIFICATE_NAME,
            'namespace': config.namespace,
        },
        'spec': {
            # the ingress tls section reads the certificate from this secret
            'secretName': config.ingress.tls.secret_name,
            'issuerRef': {
                'name': issuer.name,
                'kind': 'ClusterIssuer',
            },
            'dnsNames': dns_names,
        },
    }

def create_cert_manager_manifests(args: ManifestArguments) -> list[dict[str, Any]]:
    config = args.config
    issuer = resolve_issuer(config)
    manifests = [create_cluster_issuer_manifest(issuer)]

    if config.ingress.tls.enabled:
        dns_names = get_certificate_dns_names(config)
        # a certificate without names is rejected by cert-manager
        if dns_names:
            manifests.append(create_certificate_manifest(config, issuer, dns_names))

    return manifests
