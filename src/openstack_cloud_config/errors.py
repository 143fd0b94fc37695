# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Errors raised while generating the cloud provider configuration."""
from __future__ import annotations


class CloudProviderConfigError(Exception):
    """Base class for cloud provider configuration errors.

    The error raised by the failing collaborator is chained as ``__cause__``.

    Attributes:
        message: Short description of the failed stage.
        cause: The original error, if any.
    """

    def __init__(self, message: str):
        """Initialize the error.

        Args:
            message: Short description of the failed stage.
        """
        super().__init__(message)
        self.message = message

    @property
    def cause(self) -> BaseException | None:
        """The original error that caused this one."""
        return self.__cause__

    def __str__(self) -> str:
        """Render the stage message followed by the original error.

        Returns:
            The error message.
        """
        if self.__cause__ is None:
            return self.message
        return f"{self.message}: {self.__cause__}"


class SessionError(CloudProviderConfigError):
    """Represents a failure to load the authenticated cloud profile."""


class ClientError(CloudProviderConfigError):
    """Represents a failure to create the network client."""


class CAReadError(CloudProviderConfigError):
    """Represents a failure to read the CA certificate file from disk."""


class NetworkLookupError(CloudProviderConfigError):
    """Represents a failure to resolve an external network name to its ID."""


class InvalidInstallConfigError(CloudProviderConfigError):
    """Represents an install config that cannot be used."""
