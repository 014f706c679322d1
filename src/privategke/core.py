# Node pool defaults
# Applied by the resolver when a pool entry leaves the field unset.
DEFAULT_IMAGE_TYPE = "COS_CONTAINERD"
DEFAULT_MACHINE_TYPE = "n1-standard-2"
DEFAULT_DISK_SIZE_GB = 100
DEFAULT_DISK_TYPE = "pd-standard"
DEFAULT_PREEMPTIBLE = False
DEFAULT_ACCELERATOR_COUNT = 0
DEFAULT_AUTOSCALING = True
DEFAULT_MIN_COUNT = 1
DEFAULT_MAX_COUNT = 100

# Private cluster defaults
DEFAULT_MASTER_IPV4_CIDR_BLOCK = "172.16.0.0/28"

# Scopes granted to node service accounts
# IAM roles on the service account narrow these in practice.
DEFAULT_OAUTH_SCOPES = [
    "https://www.googleapis.com/auth/cloud-platform",
]
