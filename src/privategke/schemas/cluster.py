from pydantic import BaseModel, Field

from ..core import DEFAULT_MASTER_IPV4_CIDR_BLOCK, DEFAULT_OAUTH_SCOPES
from .node_pool import NodePoolSpec


class ClusterConfig(BaseModel):
    project_id: str
    name: str
    region: str
    network: str
    subnetwork: str
    min_master_version: str
    master_authorized_cidrs: list[str] = Field(
        default_factory=list, description="CIDR allowlist for control plane access"
    )
    master_ipv4_cidr_block: str = DEFAULT_MASTER_IPV4_CIDR_BLOCK
    enable_private_nodes: bool = True
    enable_private_endpoint: bool = False
    service_account: str | None = Field(
        default=None, description="Node service account email"
    )
    oauth_scopes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_OAUTH_SCOPES)
    )
    cluster_secondary_range_name: str | None = None
    services_secondary_range_name: str | None = None
    node_pools: list[NodePoolSpec] = Field(default_factory=list)
