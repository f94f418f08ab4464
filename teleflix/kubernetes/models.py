from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SHARED_VOLUME_NAMES = ('media', 'downloads')

class ConfigModel(BaseModel):
    # config files use camelCase keys, code uses snake_case
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        # unquoted yaml numbers such as PUID: 1000 or cpu: 2
        coerce_numbers_to_str=True,
        frozen=True,
    )

# Resource specifications
class ResourceSpec(ConfigModel):
    cpu: str | None = None
    memory: str | None = None

class ResourcesConfig(ConfigModel):
    requests: ResourceSpec = Field(default_factory=ResourceSpec)
    limits: ResourceSpec = Field(default_factory=ResourceSpec)

# Volume specifications
class VolumeConfig(ConfigModel):
    name: str
    mount_path: str
    size: str | None = None
    read_only: bool = Field(default=False)

    def is_shared(self) -> bool:
        return self.name in SHARED_VOLUME_NAMES

    def is_dedicated(self) -> bool:
        """a sized volume that gets its own per-service claim"""
        return not self.is_shared() and bool(self.size)

class ServiceConfig(ConfigModel):
    enabled: bool = Field(default=True)
    exposed: bool = Field(default=False)
    image: str
    tag: str = Field(default='latest')
    port: int
    resources: ResourcesConfig = Field(default_factory=ResourcesConfig)
    environment: dict[str, str] = Field(default_factory=dict)
    volumes: list[VolumeConfig] = Field(default_factory=list)

    def is_exposed(self) -> bool:
        return self.enabled and self.exposed

class ServicesConfig(ConfigModel):
    jellyfin: ServiceConfig
    sonarr: ServiceConfig
    radarr: ServiceConfig
    jackett: ServiceConfig
    qbittorrent: ServiceConfig

    def items(self) -> list[tuple[str, ServiceConfig]]:
        """services in declaration order"""
        return [(name, getattr(self, name)) for name in type(self).model_fields]

# Storage specifications
class SharedClaimConfig(ConfigModel):
    size: str
    access_modes: list[str] = Field(default_factory=lambda: ['ReadWriteOnce'])

class StorageConfig(ConfigModel):
    media: SharedClaimConfig
    downloads: SharedClaimConfig

# Networking specifications
class IngressTLSConfig(ConfigModel):
    enabled: bool = Field(default=False)
    secret_name: str = Field(default='teleflix-tls')

class IngressConfig(ConfigModel):
    enabled: bool = Field(default=True)
    class_name: str = Field(default='traefik')
    # null drops the default annotations
    annotations: dict[str, str] | None = Field(default_factory=dict)
    tls: IngressTLSConfig = Field(default_factory=IngressTLSConfig)

class IssuerConfig(ConfigModel):
    name: str = Field(default='teleflix-issuer')
    type: str = Field(default='letsencrypt')
    email: str | None = None

class CertManagerConfig(ConfigModel):
    enabled: bool = Field(default=False)
    issuer: IssuerConfig = Field(default_factory=IssuerConfig)

# Root config
class TeleflixConfig(ConfigModel):
    namespace: str
    storage_class: str | None = None
    domain: str
    services: ServicesConfig
    storage: StorageConfig
    ingress: IngressConfig = Field(default_factory=IngressConfig)
    cert_manager: CertManagerConfig = Field(default_factory=CertManagerConfig)


def validate_config(config: dict) -> TeleflixConfig:
    return TeleflixConfig.model_validate(config)
