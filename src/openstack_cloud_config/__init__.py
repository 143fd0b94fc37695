# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Generate OpenStack cloud provider configuration for cluster installation."""
