from privategke.builders import build_cluster, build_node_pool, cluster_parent
from privategke.core import DEFAULT_OAUTH_SCOPES
from privategke.resolver import resolve_node_pool
from privategke.schemas.cluster import ClusterConfig


def test_cluster_parent(cluster_config):
    assert cluster_parent(cluster_config) == "projects/test-project/locations/us-west1"


def test_build_autoscaled_node_pool(cluster_config):
    pool = resolve_node_pool({"name": "default-pool", "min_count": 2, "max_count": 5})

    np = build_node_pool(pool, cluster_config)

    assert np.name == "default-pool"
    assert np.config.machine_type == "n1-standard-2"
    assert np.config.image_type == "COS_CONTAINERD"
    assert np.config.disk_size_gb == 100
    assert list(np.config.oauth_scopes) == DEFAULT_OAUTH_SCOPES
    assert len(np.config.accelerators) == 0
    assert np.autoscaling.enabled
    assert np.autoscaling.min_node_count == 2
    assert np.autoscaling.max_node_count == 5
    assert np.initial_node_count == 2
    assert np.management.auto_repair
    assert np.management.auto_upgrade


def test_build_fixed_node_pool_with_accelerator(cluster_config):
    pool = resolve_node_pool(
        {
            "name": "gpu-pool",
            "accelerator_type": "nvidia-tesla-t4",
            "accelerator_count": 2,
            "autoscaling": False,
            "initial_node_count": 4,
        }
    )

    np = build_node_pool(pool, cluster_config)

    assert not np.autoscaling.enabled
    assert np.initial_node_count == 4
    assert len(np.config.accelerators) == 1
    assert np.config.accelerators[0].accelerator_type == "nvidia-tesla-t4"
    assert np.config.accelerators[0].accelerator_count == 2


def test_build_node_pool_service_account(cluster_inputs):
    cluster_inputs["service_account"] = "nodes@test-project.iam.gserviceaccount.com"
    config = ClusterConfig.model_validate(cluster_inputs)

    np = build_node_pool(resolve_node_pool({"name": "p"}), config)

    assert np.config.service_account == "nodes@test-project.iam.gserviceaccount.com"


def test_build_cluster(cluster_config):
    cluster = build_cluster(cluster_config)

    assert cluster.name == "test-cluster"
    assert cluster.network == "vpc"
    assert cluster.subnetwork == "gke-subnet"
    assert cluster.initial_cluster_version == "1.29"

    pcc = cluster.private_cluster_config
    assert pcc.enable_private_nodes
    assert not pcc.enable_private_endpoint
    assert pcc.master_ipv4_cidr_block == "172.16.0.0/28"

    man = cluster.master_authorized_networks_config
    assert man.enabled
    assert [b.cidr_block for b in man.cidr_blocks] == ["10.0.0.0/8"]

    assert cluster.ip_allocation_policy.use_ip_aliases
    assert [np.name for np in cluster.node_pools] == ["default-pool", "gpu-pool"]
    assert cluster.node_pools[1].initial_node_count == 2


def test_build_cluster_empty_allowlist_disables_authorized_networks(cluster_inputs):
    cluster_inputs["master_authorized_cidrs"] = []
    cluster_inputs["cluster_secondary_range_name"] = "pods"
    cluster_inputs["services_secondary_range_name"] = "services"
    cluster = build_cluster(ClusterConfig.model_validate(cluster_inputs))

    assert not cluster.master_authorized_networks_config.enabled
    assert len(cluster.master_authorized_networks_config.cidr_blocks) == 0
    assert cluster.ip_allocation_policy.cluster_secondary_range_name == "pods"
    assert cluster.ip_allocation_policy.services_secondary_range_name == "services"
