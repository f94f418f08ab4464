from .models import *
from ...lib.errors import ConfigurationError
from typing import Any
from kubernetes import client

def get_dedicated_claim_name(service_name: str, volume_name: str) -> str:
    return f"{service_name}-{volume_name}-pvc"

def get_claim_name(service_name: str, volume: VolumeConfig) -> str:
    """name of the claim backing a volume; media and downloads always use the shared claims"""
    if volume.is_shared():
        return SHARED_CLAIM_NAMES[volume.name]
    if not volume.size:
        raise ConfigurationError(f"Volume '{volume.name}' of service '{service_name}' needs a size, "
            f"only {', '.join(SHARED_CLAIM_NAMES)} may be mounted without one")
    return get_dedicated_claim_name(service_name, volume.name)

def create_pvc_manifest(config: TeleflixConfig, claim_name: str, size: str, access_modes: list[str]) -> client.V1PersistentVolumeClaim:
    return client.V1PersistentVolumeClaim(
        api_version="v1",
        kind="PersistentVolumeClaim",
        metadata=client.V1ObjectMeta(
            name=claim_name,
            namespace=config.namespace,
        ),
        spec=client.V1PersistentVolumeClaimSpec(
            access_modes=list(access_modes),
            # omitted when unset, so the cluster default class applies
            storage_class_name=config.storage_class,
            resources=client.V1VolumeResourceRequirements(
                requests={ "storage": size }
            )
        )
    )

def create_volume_manifest(args: ServiceManifestArguments, volume: VolumeConfig) -> tuple[list[dict[str, Any]], list[client.V1Volume], list[client.V1VolumeMount]]:
    """ returns a tuple of manifests, volumes and volume mounts"""

    manifests: list[Any] = []
    claim_name = get_claim_name(args.service_name, volume)

    if volume.is_dedicated():
        assert volume.size is not None
        pvc = create_pvc_manifest(args.config, claim_name, volume.size, DEDICATED_CLAIM_ACCESS_MODES)
        manifests.append(client.ApiClient().sanitize_for_serialization(pvc))

    volumes = [client.V1Volume(
        name=volume.name,
        persistent_volume_claim=client.V1PersistentVolumeClaimVolumeSource(
            claim_name=claim_name
        )
    )]
    volume_mounts = [client.V1VolumeMount(
        name=volume.name,
        mount_path=volume.mount_path,
        read_only=True if volume.read_only else None
    )]

    return manifests, volumes, volume_mounts
