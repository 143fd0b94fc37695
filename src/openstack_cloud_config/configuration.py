# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Install-time configuration relevant to the cloud provider config."""

import logging
from typing import TextIO

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from openstack_cloud_config.errors import InvalidInstallConfigError

logger = logging.getLogger(__name__)


class InstallSettings(BaseModel):
    """Subset of the install config used to generate the cloud provider config.

    Attributes:
        cloud: Name of the cloud entry in clouds.yaml.
        external_network: Name of the network used for load balancer floating IPs.
    """

    cloud: str
    external_network: str = Field("", alias="externalNetwork")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("external_network", mode="before")
    @classmethod
    def empty_external_network(cls, value: str | None) -> str:
        """Treat an unset external network as empty.

        Args:
            value: The external network from the install config.

        Returns:
            The external network name, or an empty string.
        """
        return "" if value is None else value

    @staticmethod
    def from_yaml_file(file: TextIO) -> "InstallSettings":
        """Initialize the settings from an install config YAML file.

        Args:
            file: The file object to parse the install config from.

        Raises:
            InvalidInstallConfigError: If the OpenStack platform section is missing or invalid.

        Returns:
            The install settings.
        """
        try:
            install_config = yaml.safe_load(file)
        except yaml.YAMLError as exc:
            raise InvalidInstallConfigError("failed to parse install config") from exc

        try:
            platform = install_config["platform"]["openstack"]
        except (KeyError, TypeError) as exc:
            raise InvalidInstallConfigError(
                "install config is missing the platform.openstack section"
            ) from exc
        if not isinstance(platform, dict):
            raise InvalidInstallConfigError("platform.openstack must be a mapping")

        try:
            settings = InstallSettings.model_validate(platform)
        except ValidationError as exc:
            raise InvalidInstallConfigError("invalid platform.openstack section") from exc
        logger.debug(
            "Loaded install settings for cloud %s, external network %r",
            settings.cloud,
            settings.external_network,
        )
        return settings
