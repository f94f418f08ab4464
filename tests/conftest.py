import pytest

from teleflix.kubernetes.build_vars import resolve_config
from teleflix.kubernetes.create_manifests import create_manifest_documents


@pytest.fixture
def default_config():
    return resolve_config()


@pytest.fixture
def make_config():
    """Build a resolved config from camelCase overrides merged over the defaults"""
    def fn(*overrides):
        return resolve_config(*overrides)
    return fn


@pytest.fixture
def make_documents(make_config):
    def fn(*overrides):
        return create_manifest_documents(make_config(*overrides))
    return fn


def find_manifest(manifests, kind, name):
    for manifest in manifests:
        if manifest['kind'] == kind and manifest['metadata']['name'] == name:
            return manifest
    raise AssertionError(f"no {kind}/{name} in {[(m['kind'], m['metadata']['name']) for m in manifests]}")


def all_services(enabled=True, exposed=False):
    return {
        'services': {
            name: {'enabled': enabled, 'exposed': exposed}
            for name in ['jellyfin', 'sonarr', 'radarr', 'jackett', 'qbittorrent']
        }
    }
