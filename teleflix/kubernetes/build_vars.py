import yaml
from typing import Any
from ..lib.environment import Environment, hydrate_value
from ..lib.errors import ConfigurationError
from ..lib.yaml_tools import deep_merge
from .models import TeleflixConfig, validate_config
from .utils import load_file

LINUXSERVER_ENVIRONMENT = {
    'PUID': '1000',
    'PGID': '1000',
    'TZ': 'Europe/Paris',
}

def get_static_default_service_yaml(image: str, port: int, requests: tuple[str, str], limits: tuple[str, str],
        volumes: list[dict[str, Any]], environment: dict[str, str] | None = None, exposed: bool = False) -> dict[str, Any]:
    return {
        'enabled': True,
        'exposed': exposed,
        'image': image,
        'tag': 'latest',
        'port': port,
        'resources': {
            'requests': { 'cpu': requests[0], 'memory': requests[1] },
            'limits': { 'cpu': limits[0], 'memory': limits[1] },
        },
        'environment': dict(environment or {}),
        'volumes': volumes,
    }

def get_default_config() -> dict[str, Any]:
    """returns a fresh copy of the default configuration, in config file (camelCase) form"""
    return {
        'namespace': 'teleflix',
        'storageClass': 'default',
        'domain': 'teleflix.local',
        'services': {
            'jellyfin': get_static_default_service_yaml(
                'jellyfin/jellyfin', 8096, ('500m', '512Mi'), ('2', '2Gi'),
                exposed=True,
                volumes=[
                    { 'name': 'media', 'mountPath': '/media', 'readOnly': True },
                    { 'name': 'config', 'mountPath': '/config', 'size': '1Gi' },
                ]),
            'sonarr': get_static_default_service_yaml(
                'linuxserver/sonarr', 8989, ('100m', '256Mi'), ('500m', '512Mi'),
                environment=LINUXSERVER_ENVIRONMENT,
                volumes=[
                    { 'name': 'config', 'mountPath': '/config', 'size': '1Gi' },
                    { 'name': 'downloads', 'mountPath': '/downloads' },
                    { 'name': 'media', 'mountPath': '/tv' },
                ]),
            'radarr': get_static_default_service_yaml(
                'linuxserver/radarr', 7878, ('100m', '256Mi'), ('500m', '512Mi'),
                environment=LINUXSERVER_ENVIRONMENT,
                volumes=[
                    { 'name': 'config', 'mountPath': '/config', 'size': '1Gi' },
                    { 'name': 'downloads', 'mountPath': '/downloads' },
                    { 'name': 'media', 'mountPath': '/movies' },
                ]),
            'jackett': get_static_default_service_yaml(
                'linuxserver/jackett', 9117, ('100m', '128Mi'), ('200m', '256Mi'),
                environment=LINUXSERVER_ENVIRONMENT,
                volumes=[
                    { 'name': 'config', 'mountPath': '/config', 'size': '500Mi' },
                ]),
            'qbittorrent': get_static_default_service_yaml(
                'linuxserver/qbittorrent', 8080, ('200m', '512Mi'), ('1', '1Gi'),
                environment=LINUXSERVER_ENVIRONMENT | { 'WEBUI_PORT': '8080' },
                volumes=[
                    { 'name': 'config', 'mountPath': '/config', 'size': '1Gi' },
                    { 'name': 'downloads', 'mountPath': '/downloads' },
                ]),
        },
        'storage': {
            'media': { 'size': '100Gi', 'accessModes': ['ReadWriteMany'] },
            'downloads': { 'size': '50Gi', 'accessModes': ['ReadWriteOnce'] },
        },
        'ingress': {
            'enabled': True,
            # k3s ships traefik
            'className': 'traefik',
            'annotations': {
                'nginx.ingress.kubernetes.io/rewrite-target': '/',
            },
            'tls': {
                'enabled': False,
                'secretName': 'teleflix-tls',
            },
        },
        'certManager': {
            'enabled': False,
            'issuer': {
                'name': 'teleflix-issuer',
                'type': 'letsencrypt',
                'email': '',
            },
        },
    }

def load_config_yaml(config_file: str, env: Environment) -> dict[str, Any]:
    # a missing config file means "use the defaults"
    data = load_file(config_file)
    if data is None:
        return {}
    loaded = yaml.safe_load(data)
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigurationError(f"Config file {config_file} must contain a mapping, found {type(loaded).__name__}")
    return hydrate_value(loaded, env)

def get_cli_overrides(namespace: str | None = None, storage_class: str | None = None) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if namespace:
        overrides['namespace'] = namespace
    if storage_class:
        overrides['storageClass'] = storage_class
    return overrides

def resolve_config(*overrides: dict[str, Any]) -> TeleflixConfig:
    """merges each override over the defaults, in order, and validates the result"""
    config = get_default_config()
    for override in overrides:
        config = deep_merge(config, override)
    return validate_config(config)

def build_config(config_file: str, env: Environment | None = None,
        namespace: str | None = None, storage_class: str | None = None) -> TeleflixConfig:
    if env is None:
        env = Environment.from_os()
    file_config = load_config_yaml(config_file, env)
    return resolve_config(file_config, get_cli_overrides(namespace, storage_class))
