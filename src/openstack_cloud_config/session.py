# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Load the OpenStack session and generate the cloud provider config for an install."""

import logging
from dataclasses import dataclass

import keystoneauth1.exceptions
import openstack.config
import openstack.connection
import openstack.exceptions
from openstack.config.cloud_region import CloudRegion
from openstack.proxy import Proxy as NetworkProxy

from openstack_cloud_config.configuration import InstallSettings
from openstack_cloud_config.errors import ClientError, SessionError
from openstack_cloud_config.models import AuthProfile, ProviderConfigArtifact
from openstack_cloud_config.network import NetworkNameResolver
from openstack_cloud_config.provider_config import (
    FileReader,
    generate_cloud_provider_config,
    read_file_bytes,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    """An OpenStack cloud profile loaded from clouds.yaml.

    Attributes:
        cloud_region: The openstacksdk cloud region, used to create API clients.
        profile: The authentication profile of the cloud.
    """

    cloud_region: CloudRegion
    profile: AuthProfile


def get_session(
    cloud_name: str, config: openstack.config.OpenStackConfig | None = None
) -> Session:
    """Load the named cloud profile.

    Args:
        cloud_name: Name of the cloud entry in clouds.yaml.
        config: The openstacksdk config loader, defaults to the standard clouds.yaml lookup.

    Raises:
        SessionError: If the cloud profile cannot be loaded.

    Returns:
        The session.
    """
    try:
        if config is None:
            config = openstack.config.OpenStackConfig()
        cloud_region = config.get_one(cloud=cloud_name)
    except (
        openstack.exceptions.SDKException,
        keystoneauth1.exceptions.ClientException,
    ) as exc:
        logger.error("Unable to load cloud %s from clouds.yaml", cloud_name)
        raise SessionError("failed to get cloud config for openstack") from exc
    logger.debug("Loaded cloud %s", cloud_name)
    return Session(cloud_region=cloud_region, profile=AuthProfile.from_cloud_region(cloud_region))


def get_network_client(session: Session) -> NetworkProxy:
    """Create a client to the OpenStack networking API.

    Args:
        session: The session of the cloud.

    Raises:
        ClientError: If the client cannot be created.

    Returns:
        The networking API client.
    """
    try:
        connection = openstack.connection.Connection(config=session.cloud_region)
        return connection.network
    except (
        openstack.exceptions.SDKException,
        keystoneauth1.exceptions.ClientException,
    ) as exc:
        logger.error("Unable to create the OpenStack network client")
        raise ClientError("failed to create a network client") from exc


def generate_cloud_provider_config_for_install(
    settings: InstallSettings,
    *,
    config: openstack.config.OpenStackConfig | None = None,
    resolver: NetworkNameResolver | None = None,
    read_file: FileReader = read_file_bytes,
) -> ProviderConfigArtifact:
    """Generate the cloud provider config for the cloud named in the install settings.

    Args:
        settings: The install settings.
        config: The openstacksdk config loader, defaults to the standard clouds.yaml lookup.
        resolver: Resolves the external network name.
        read_file: Reads the CA certificate file.

    Returns:
        The cloud provider config and the CA bundle.
    """
    session = get_session(settings.cloud, config)
    network_client = get_network_client(session)
    return generate_cloud_provider_config(
        network_client, session.profile, settings, resolver=resolver, read_file=read_file
    )
