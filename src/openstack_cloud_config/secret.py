# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Generate the cloud provider credentials stored in the system secret."""

import logging

from openstack_cloud_config.constants import CA_BUNDLE_MOUNT_PATH, GLOBAL_SECTION
from openstack_cloud_config.models import AuthProfile

logger = logging.getLogger(__name__)

_NAMED_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def quote(value: str) -> str:
    """Quote a value as a double-quoted string literal.

    Printable characters are kept as is, quotes and backslashes are escaped and
    non-printable characters are written as escape sequences.

    Args:
        value: The value to quote.

    Returns:
        The quoted value.
    """
    quoted = []
    for char in value:
        if char in _NAMED_ESCAPES:
            quoted.append(_NAMED_ESCAPES[char])
        elif char.isprintable():
            quoted.append(char)
        elif ord(char) < 0x80:
            quoted.append(f"\\x{ord(char):02x}")
        elif ord(char) <= 0xFFFF:
            quoted.append(f"\\u{ord(char):04x}")
        else:
            quoted.append(f"\\U{ord(char):08x}")
    return '"' + "".join(quoted) + '"'


def cloud_provider_config_secret(profile: AuthProfile) -> bytes:
    """Generate the cloud provider config stored in the credentials secret.

    The config is written by hand rather than with an INI library: the cloud
    provider reads it with a gcfg parser, which treats an unquoted ``#`` as the
    start of a comment and does not understand backtick quoting. Every value is
    therefore emitted as a double-quoted literal.

    Args:
        profile: The cloud authentication profile.

    Returns:
        The config file content.
    """
    fields = (
        ("auth-url", profile.auth_url),
        ("username", profile.username),
        ("password", profile.password),
        ("tenant-id", profile.project_id),
        ("tenant-name", profile.project_name),
        ("domain-id", profile.resolved_domain_id),
        ("domain-name", profile.resolved_domain_name),
        ("region", profile.region_name),
    )
    lines = [GLOBAL_SECTION]
    lines.extend(f"{key} = {quote(value)}" for key, value in fields if value)
    if profile.ca_cert_file:
        lines.append(f"ca-file = {CA_BUNDLE_MOUNT_PATH}")
    logger.debug(
        "Generated credentials config with keys: %s", [key for key, value in fields if value]
    )
    return ("\n".join(lines) + "\n").encode("utf-8")
