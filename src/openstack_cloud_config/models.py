# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Data models for the cloud provider config generators."""

from dataclasses import dataclass
from typing import Any, Mapping

from openstack.config.cloud_region import CloudRegion


@dataclass(frozen=True)
class AuthProfile:
    """Authentication and identity attributes of an OpenStack cloud profile.

    Attributes:
        auth_url: The keystone authentication URL.
        username: The username to log in with.
        password: The password to log in with.
        project_id: The project (tenant) ID.
        project_name: The project (tenant) name.
        domain_id: The domain ID.
        user_domain_id: The ID of the domain containing the user.
        domain_name: The domain name.
        user_domain_name: The name of the domain containing the user.
        region_name: The region.
        ca_cert_file: Path to the CA certificate bundle used to reach the API.
    """

    auth_url: str = ""
    username: str = ""
    password: str = ""
    project_id: str = ""
    project_name: str = ""
    domain_id: str = ""
    user_domain_id: str = ""
    domain_name: str = ""
    user_domain_name: str = ""
    region_name: str = ""
    ca_cert_file: str = ""

    @property
    def resolved_domain_id(self) -> str:
        """The domain ID, falling back to the user domain ID."""
        return self.domain_id or self.user_domain_id

    @property
    def resolved_domain_name(self) -> str:
        """The domain name, falling back to the user domain name."""
        return self.domain_name or self.user_domain_name

    @classmethod
    def from_cloud_region(cls, cloud_region: CloudRegion) -> "AuthProfile":
        """Construct the profile from an openstacksdk cloud region.

        Args:
            cloud_region: The cloud region loaded from clouds.yaml.

        Returns:
            The AuthProfile.
        """
        config: Mapping[str, Any] = cloud_region.config
        auth: Mapping[str, Any] = config.get("auth") or {}
        return cls(
            auth_url=_as_str(auth.get("auth_url")),
            username=_as_str(auth.get("username")),
            password=_as_str(auth.get("password")),
            project_id=_as_str(auth.get("project_id")),
            project_name=_as_str(auth.get("project_name")),
            domain_id=_as_str(auth.get("domain_id")),
            user_domain_id=_as_str(auth.get("user_domain_id")),
            domain_name=_as_str(auth.get("domain_name")),
            user_domain_name=_as_str(auth.get("user_domain_name")),
            region_name=_as_str(cloud_region.region_name),
            ca_cert_file=_as_str(config.get("cacert")),
        )


def _as_str(value: Any) -> str:
    """Convert an optional config value to a string, mapping None to empty.

    Args:
        value: The config value.

    Returns:
        The string value.
    """
    return "" if value is None else str(value)


@dataclass(frozen=True)
class ProviderConfigArtifact:
    """The generated cloud provider config and its CA bundle.

    Attributes:
        config: The cloud provider config text, stored in a configmap.
        ca_bundle: Content of the CA certificate file, if one was configured.
    """

    config: str
    ca_bundle: bytes | None = None
