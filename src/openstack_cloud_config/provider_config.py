# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Generate the cloud provider config stored in the cloud-config configmap."""

import logging
from pathlib import Path
from typing import Callable

from openstack.proxy import Proxy as NetworkProxy

from openstack_cloud_config.configuration import InstallSettings
from openstack_cloud_config.constants import (
    CA_BUNDLE_MOUNT_PATH,
    CREDENTIALS_SECRET_NAME,
    CREDENTIALS_SECRET_NAMESPACE,
    GLOBAL_SECTION,
    LOAD_BALANCER_SECTION,
)
from openstack_cloud_config.errors import CAReadError, NetworkLookupError
from openstack_cloud_config.models import AuthProfile, ProviderConfigArtifact
from openstack_cloud_config.network import NetworkNameResolver, OpenStackNetworkNameResolver

logger = logging.getLogger(__name__)

FileReader = Callable[[str], bytes]


def read_file_bytes(path: str) -> bytes:
    """Read the content of a local file.

    Args:
        path: The file path.

    Returns:
        The file content.
    """
    return Path(path).read_bytes()


def generate_cloud_provider_config(
    network_client: NetworkProxy,
    profile: AuthProfile,
    settings: InstallSettings,
    *,
    resolver: NetworkNameResolver | None = None,
    read_file: FileReader = read_file_bytes,
) -> ProviderConfigArtifact:
    """Generate the cloud provider config for the OpenStack platform.

    The credentials are not part of the config, it references the credentials
    secret instead. The region is written unquoted, unlike in the secret.

    Args:
        network_client: The client to the OpenStack networking API.
        profile: The cloud authentication profile.
        settings: The install settings.
        resolver: Resolves the external network name, defaults to the OpenStack API lookup.
        read_file: Reads the CA certificate file.

    Raises:
        CAReadError: If the CA certificate file cannot be read.
        NetworkLookupError: If the external network cannot be resolved.

    Returns:
        The cloud provider config and the CA bundle.
    """
    if resolver is None:
        resolver = OpenStackNetworkNameResolver()

    config = (
        f"{GLOBAL_SECTION}\n"
        f"secret-name = {CREDENTIALS_SECRET_NAME}\n"
        f"secret-namespace = {CREDENTIALS_SECRET_NAMESPACE}\n"
    )
    if profile.region_name:
        config += f"region = {profile.region_name}\n"

    ca_bundle = None
    if profile.ca_cert_file:
        config += f"ca-file = {CA_BUNDLE_MOUNT_PATH}\n"
        try:
            ca_bundle = read_file(profile.ca_cert_file)
        except OSError as exc:
            logger.error("Unable to read CA certificate file %s", profile.ca_cert_file)
            raise CAReadError("failed to read clouds.yaml ca-cert from disk") from exc
        logger.debug("Read CA bundle from %s", profile.ca_cert_file)

    if network_name := settings.external_network:
        try:
            network_id = resolver.resolve(network_client, network_name)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.error("Unable to resolve external network %s", network_name)
            raise NetworkLookupError(f"failed to fetch external network {network_name}") from exc
        logger.info(
            "Using network %s (%s) for load balancer floating IPs", network_name, network_id
        )
        # The install config names the network, the cloud provider wants its ID.
        config += f"\n{LOAD_BALANCER_SECTION}\n"
        config += f"floating-network-id = {network_id}\n"

    return ProviderConfigArtifact(config=config, ca_bundle=ca_bundle)
