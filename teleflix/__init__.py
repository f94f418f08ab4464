"""
teleflix - Kubernetes manifest generator for a self-hosted media stack

Renders the namespace, storage, cert-manager, per-service and ingress
manifests from a single declarative configuration, using kubernetes-client
models for the api objects.
"""

from .kubernetes.build_vars import build_config, get_default_config, resolve_config
from .kubernetes.create_manifests import create_manifest_documents, create_manifests, render_manifests
from .kubernetes.models import TeleflixConfig
from .lib.errors import ConfigurationError, SerializationError

__all__ = [
    'ConfigurationError',
    'SerializationError',
    'TeleflixConfig',
    'build_config',
    'create_manifest_documents',
    'create_manifests',
    'get_default_config',
    'render_manifests',
    'resolve_config',
]
