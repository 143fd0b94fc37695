#  Copyright 2025 Canonical Ltd.
#  See LICENSE file for licensing details.

"""Unit test setups and configurations."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest


@pytest.fixture(name="network_client", scope="function")
def network_client_fixture() -> MagicMock:
    """Mock of the OpenStack networking API client."""
    return MagicMock()


@pytest.fixture(name="ca_cert_file", scope="function")
def ca_cert_file_fixture(tmp_path: Path) -> Path:
    """A CA certificate file on disk."""
    path = tmp_path / "ca.pem"
    path.write_bytes(b"-----BEGIN CERTIFICATE-----\nMIIB\n-----END CERTIFICATE-----\n")
    return path
