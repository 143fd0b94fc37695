# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Constants shared by the cloud provider config generators."""

# Consumed by the deployment that mounts the cloud-config configmap. Do not change.
CA_BUNDLE_MOUNT_PATH = "/etc/kubernetes/static-pod-resources/configmaps/cloud-config/ca-bundle.pem"

CREDENTIALS_SECRET_NAME = "openstack-credentials"
CREDENTIALS_SECRET_NAMESPACE = "kube-system"

GLOBAL_SECTION = "[Global]"
LOAD_BALANCER_SECTION = "[LoadBalancer]"

CLOUD_PROVIDER_CONFIG_FILE_NAME = "cloud.conf"
CA_BUNDLE_FILE_NAME = "ca-bundle.pem"
CREDENTIALS_SECRET_FILE_NAME = "clouds.conf"
