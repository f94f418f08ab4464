from dataclasses import dataclass
from ..models import *
from typing import Callable

APP_SELECTOR_NAME = 'app'
COMPONENT_SELECTOR_NAME = 'component'
COMPONENT_SELECTOR_VALUE = 'teleflix'

# manifest key order is significant for `kubectl apply -f <dir>/`
NAMESPACE_MANIFEST_KEY = '00-namespace'
STORAGE_MANIFEST_KEY = '01-storage'
CERT_MANAGER_MANIFEST_KEY = '02-cert-manager'
FIRST_SERVICE_MANIFEST_INDEX = 3
INGRESS_MANIFEST_KEY = '99-ingress'

MEDIA_CLAIM_NAME = 'media-pvc'
DOWNLOADS_CLAIM_NAME = 'downloads-pvc'
SHARED_CLAIM_NAMES = {
    'media': MEDIA_CLAIM_NAME,
    'downloads': DOWNLOADS_CLAIM_NAME,
}
DEDICATED_CLAIM_ACCESS_MODES = ['ReadWriteOnce']

INGRESS_NAME = 'teleflix-ingress'
CERTIFICATE_NAME = 'teleflix-certificate'
CERT_MANAGER_API_VERSION = 'cert-manager.io/v1'
LETSENCRYPT_PRODUCTION_SERVER = 'https://acme-v02.api.letsencrypt.org/directory'

@dataclass
class ManifestArguments:
    config: TeleflixConfig
    service_labels_factory: Callable[[str], dict[str, str]]

@dataclass
class ServiceManifestArguments:
    config: TeleflixConfig
    service_name: str
    service: ServiceConfig
    service_labels: dict[str, str]
