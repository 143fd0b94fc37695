# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Factories for the cloud provider config models."""

import factory

from openstack_cloud_config.configuration import InstallSettings
from openstack_cloud_config.models import AuthProfile


class AuthProfileFactory(factory.Factory):
    """Factory class for a fully populated AuthProfile.

    Attributes:
        auth_url: The keystone authentication URL.
        username: The username.
        password: The password.
        project_id: The project ID.
        project_name: The project name.
        domain_id: The domain ID.
        user_domain_id: The user domain ID.
        domain_name: The domain name.
        user_domain_name: The user domain name.
        region_name: The region.
        ca_cert_file: The CA certificate file path.
    """

    class Meta:
        """Meta class for AuthProfile.

        Attributes:
            model: The metadata reference model.
        """

        model = AuthProfile

    auth_url = "https://keystone.example.com:5000/v3"
    username = "admin"
    password = "secret"
    project_id = "b5b1fc5ad7f24dbd9d4e6a7b0f8e1c2d"
    project_name = "shiftstack"
    domain_id = "default"
    user_domain_id = ""
    domain_name = "Default"
    user_domain_name = ""
    region_name = "RegionOne"
    ca_cert_file = ""


class InstallSettingsFactory(factory.Factory):
    """Factory class for InstallSettings.

    Attributes:
        cloud: Name of the cloud entry in clouds.yaml.
        external_network: Name of the external network.
    """

    class Meta:
        """Meta class for InstallSettings.

        Attributes:
            model: The metadata reference model.
        """

        model = InstallSettings

    cloud = "openstack"
    external_network = ""
