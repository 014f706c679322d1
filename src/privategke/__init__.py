import warnings

# google-cloud-container emits Python version FutureWarnings on import
warnings.filterwarnings("ignore", category=FutureWarning, module="google.api_core")

from .resolver import resolve_node_pool, resolve_node_pools  # noqa: E402
from .schemas.node_pool import NodePoolSpec, ResolvedNodePool  # noqa: E402

__all__ = [
    "NodePoolSpec",
    "ResolvedNodePool",
    "resolve_node_pool",
    "resolve_node_pools",
]
