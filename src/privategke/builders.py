from google.cloud import container_v1

from .logger import logger
from .resolver import resolve_node_pools
from .schemas.cluster import ClusterConfig
from .schemas.node_pool import ResolvedNodePool


def cluster_parent(config: ClusterConfig) -> str:
    return f"projects/{config.project_id}/locations/{config.region}"


def build_node_pool(
    pool: ResolvedNodePool, config: ClusterConfig
) -> container_v1.NodePool:
    """
    Converts a resolved pool into the container_v1 NodePool message used by
    CreateNodePool / CreateCluster requests.
    """
    node_config = container_v1.NodeConfig(
        machine_type=pool.machine_type,
        disk_size_gb=pool.disk_size_gb,
        disk_type=pool.disk_type,
        image_type=pool.image_type,
        preemptible=pool.preemptible,
        oauth_scopes=list(config.oauth_scopes),
        accelerators=[
            container_v1.AcceleratorConfig(
                accelerator_type=a.type, accelerator_count=a.count
            )
            for a in pool.guest_accelerators
        ],
    )
    if config.service_account:
        node_config.service_account = config.service_account

    # Fixed pools are sized by initial_node_count alone
    node_pool = container_v1.NodePool(
        name=pool.name,
        config=node_config,
        initial_node_count=pool.initial_node_count,
        management=container_v1.NodeManagement(auto_repair=True, auto_upgrade=True),
    )

    bounds = pool.autoscaling_bounds
    if bounds is not None:
        node_pool.autoscaling = container_v1.NodePoolAutoscaling(
            enabled=True,
            min_node_count=bounds["min"],
            max_node_count=bounds["max"],
        )

    return node_pool


def _authorized_networks(
    cidrs: list[str],
) -> container_v1.MasterAuthorizedNetworksConfig:
    # One block per allowlist entry; an empty allowlist disables the feature.
    return container_v1.MasterAuthorizedNetworksConfig(
        enabled=bool(cidrs),
        cidr_blocks=[
            container_v1.MasterAuthorizedNetworksConfig.CidrBlock(
                display_name=cidr, cidr_block=cidr
            )
            for cidr in cidrs
        ],
    )


def build_cluster(config: ClusterConfig) -> container_v1.Cluster:
    """
    Builds the private cluster definition, node pools included.
    Nothing is sent to the API here.
    """
    pools = resolve_node_pools(config.node_pools)

    ip_policy = container_v1.IPAllocationPolicy(use_ip_aliases=True)
    if config.cluster_secondary_range_name:
        ip_policy.cluster_secondary_range_name = config.cluster_secondary_range_name
    if config.services_secondary_range_name:
        ip_policy.services_secondary_range_name = config.services_secondary_range_name

    cluster = container_v1.Cluster(
        name=config.name,
        network=config.network,
        subnetwork=config.subnetwork,
        initial_cluster_version=config.min_master_version,
        private_cluster_config=container_v1.PrivateClusterConfig(
            enable_private_nodes=config.enable_private_nodes,
            enable_private_endpoint=config.enable_private_endpoint,
            master_ipv4_cidr_block=config.master_ipv4_cidr_block,
        ),
        master_authorized_networks_config=_authorized_networks(
            config.master_authorized_cidrs
        ),
        ip_allocation_policy=ip_policy,
        node_pools=[build_node_pool(p, config) for p in pools],
    )
    logger.info(
        f"Built cluster {config.name} in {cluster_parent(config)} "
        f"with {len(pools)} node pools"
    )
    return cluster
