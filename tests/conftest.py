import pytest

from privategke.schemas.cluster import ClusterConfig


@pytest.fixture
def cluster_inputs():
    return {
        "project_id": "test-project",
        "name": "test-cluster",
        "region": "us-west1",
        "network": "vpc",
        "subnetwork": "gke-subnet",
        "min_master_version": "1.29",
        "master_authorized_cidrs": ["10.0.0.0/8"],
        "node_pools": [
            {"name": "default-pool"},
            {
                "name": "gpu-pool",
                "accelerator_type": "nvidia-tesla-t4",
                "accelerator_count": 2,
                "autoscaling": False,
                "min_count": 2,
            },
        ],
    }


@pytest.fixture
def cluster_config(cluster_inputs):
    return ClusterConfig.model_validate(cluster_inputs)
