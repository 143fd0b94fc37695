# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Resolve OpenStack network names to network IDs."""

import abc
import logging

import openstack.exceptions
from openstack.proxy import Proxy as NetworkProxy

logger = logging.getLogger(__name__)


class NetworkNameResolver(abc.ABC):
    """Look up the ID of a network from its name."""

    @abc.abstractmethod
    def resolve(self, network_client: NetworkProxy, name: str) -> str:
        """Get the ID of the network with the given name.

        Args:
            network_client: The client to the OpenStack networking API.
            name: The network name.

        Raises:
            Exception: Implementation specific lookup error, e.g. no network or more than
                one network with the name, or an API failure.
        """


class OpenStackNetworkNameResolver(NetworkNameResolver):
    """Resolve network names through the OpenStack networking API."""

    def resolve(self, network_client: NetworkProxy, name: str) -> str:
        """Get the ID of the network with the given name.

        Only exact name matches count, a network ID passed as name is not accepted.

        Args:
            network_client: The client to the OpenStack networking API.
            name: The network name.

        Raises:
            ResourceNotFound: If no network has the name.
            DuplicateResource: If more than one network has the name.

        Returns:
            The network ID.
        """
        network_ids = [network.id for network in network_client.networks(name=name)]
        if not network_ids:
            raise openstack.exceptions.ResourceNotFound(f"Unable to find network with name {name}")
        if len(network_ids) > 1:
            raise openstack.exceptions.DuplicateResource(
                f"Found {len(network_ids)} networks with name {name}: {', '.join(network_ids)}"
            )
        logger.debug("Resolved network %s to ID %s", name, network_ids[0])
        return network_ids[0]
