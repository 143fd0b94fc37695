# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""The CLI entrypoint for the openstack-cloud-config application."""

import logging
import sys
from pathlib import Path
from typing import TextIO

import click
import openstack.config

from openstack_cloud_config.configuration import InstallSettings
from openstack_cloud_config.constants import (
    CA_BUNDLE_FILE_NAME,
    CLOUD_PROVIDER_CONFIG_FILE_NAME,
    CREDENTIALS_SECRET_FILE_NAME,
)
from openstack_cloud_config.errors import CloudProviderConfigError
from openstack_cloud_config.provider_config import generate_cloud_provider_config
from openstack_cloud_config.secret import cloud_provider_config_secret
from openstack_cloud_config.session import get_network_client, get_session

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--install-config",
    type=click.File(mode="r", encoding="utf-8"),
    required=True,
    help="The install config file naming the cloud and the external network.",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, writable=True, path_type=Path),
    required=True,
    help="The directory to write the generated files to.",
)
@click.option(
    "--clouds-yaml",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="The clouds.yaml file. If not set, the standard clouds.yaml locations are searched.",
)
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]),
    default="INFO",
    help="The log level for the application.",
)
def main(
    install_config: TextIO, output_dir: Path, clouds_yaml: Path | None, log_level: str
) -> None:
    """Generate the OpenStack cloud provider config and credentials.

    Args:
        install_config: The install config file.
        output_dir: The directory to write the generated files to.
        clouds_yaml: The clouds.yaml file.
        log_level: The log level.

    Raises:
        ClickException: If the files cannot be generated.
    """
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    try:
        settings = InstallSettings.from_yaml_file(install_config)
        config = (
            openstack.config.OpenStackConfig(config_files=[str(clouds_yaml)])
            if clouds_yaml
            else None
        )
        session = get_session(settings.cloud, config)
        artifact = generate_cloud_provider_config(
            get_network_client(session), session.profile, settings
        )
    except CloudProviderConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    output_dir.mkdir(parents=True, exist_ok=True)
    secret_path = output_dir / CREDENTIALS_SECRET_FILE_NAME
    secret_path.touch(mode=0o600)
    # touch keeps the mode of a file left by an earlier run.
    secret_path.chmod(0o600)
    secret_path.write_bytes(cloud_provider_config_secret(session.profile))
    (output_dir / CLOUD_PROVIDER_CONFIG_FILE_NAME).write_text(artifact.config, encoding="utf-8")
    if artifact.ca_bundle is not None:
        (output_dir / CA_BUNDLE_FILE_NAME).write_bytes(artifact.ca_bundle)
    logger.info("Wrote cloud provider config for cloud %s to %s", settings.cloud, output_dir)
