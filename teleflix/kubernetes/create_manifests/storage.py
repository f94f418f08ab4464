from .models import *
from .volume import create_pvc_manifest
from typing import Any
from kubernetes import client

def create_storage_manifests(args: ManifestArguments) -> list[dict[str, Any]]:
    """the shared claims exist regardless of which services mount them"""
    storage = args.config.storage
    shared_claims = [
        (MEDIA_CLAIM_NAME, storage.media),
        (DOWNLOADS_CLAIM_NAME, storage.downloads),
    ]

    manifests = []
    for claim_name, claim in shared_claims:
        pvc = create_pvc_manifest(args.config, claim_name, claim.size, claim.access_modes)
        manifests.append(client.ApiClient().sanitize_for_serialization(pvc))
    return manifests
