from .models import *
from .volume import create_volume_manifest
from typing import Any
from kubernetes import client

def get_image(service: ServiceConfig) -> str:
    return f"{service.image}:{service.tag}"

def create_resource_requirements(service: ServiceConfig) -> client.V1ResourceRequirements | None:
    # quantities are copied verbatim, the api server validates them
    resources_dict = {}
    requests = service.resources.requests.model_dump(exclude_none=True)
    if requests:
        resources_dict['requests'] = requests
    limits = service.resources.limits.model_dump(exclude_none=True)
    if limits:
        resources_dict['limits'] = limits
    return client.V1ResourceRequirements(**resources_dict) if resources_dict else None

def create_deployment_manifests(args: ServiceManifestArguments) -> list[dict[str, Any]]:
    """returns the dedicated claims of the service followed by its deployment"""
    manifests = []
    service = args.service

    container = client.V1Container(
        name=args.service_name,
        image=get_image(service),
        ports=[client.V1ContainerPort(
            container_port=service.port,
            protocol='TCP'
        )],
        resources=create_resource_requirements(service)
    )

    # sorted so regenerating gives the same output
    if service.environment:
        container.env = [
            client.V1EnvVar(name=name, value=value)
            for name, value in sorted(service.environment.items())
        ]

    # Create pod template spec
    pod_template = client.V1PodTemplateSpec(
        metadata=client.V1ObjectMeta(labels=args.service_labels),
        spec=client.V1PodSpec(containers=[container]),
    )
    assert pod_template.spec is not None

    # add volumes
    if service.volumes:
        pod_template_volumes = []
        container.volume_mounts = []

        for volume in service.volumes:
            volume_manifests, pod_volumes, pod_volume_mounts = create_volume_manifest(args, volume)

            manifests += volume_manifests
            pod_template_volumes += pod_volumes
            container.volume_mounts += pod_volume_mounts

        pod_template.spec.volumes = pod_template_volumes

    # Create deployment spec
    deployment_spec = client.V1DeploymentSpec(
        replicas=1,
        selector=client.V1LabelSelector(match_labels={
            APP_SELECTOR_NAME: args.service_labels[APP_SELECTOR_NAME],
            COMPONENT_SELECTOR_NAME: args.service_labels[COMPONENT_SELECTOR_NAME]
        }),
        template=pod_template,
    )

    # Create deployment
    deployment = client.V1Deployment(
        api_version='apps/v1',
        kind='Deployment',
        metadata=client.V1ObjectMeta(
            name=args.service_name,
            namespace=args.config.namespace,
            labels=args.service_labels,
        ),
        spec=deployment_spec
    )

    manifests.append(client.ApiClient().sanitize_for_serialization(deployment))

    return manifests
