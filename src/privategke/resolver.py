from collections.abc import Iterable, Mapping
from typing import Any

from .core import (
    DEFAULT_ACCELERATOR_COUNT,
    DEFAULT_AUTOSCALING,
    DEFAULT_DISK_SIZE_GB,
    DEFAULT_DISK_TYPE,
    DEFAULT_IMAGE_TYPE,
    DEFAULT_MACHINE_TYPE,
    DEFAULT_MAX_COUNT,
    DEFAULT_MIN_COUNT,
    DEFAULT_PREEMPTIBLE,
)
from .logger import logger
from .schemas.node_pool import (
    AutoscaledNodeCount,
    FixedNodeCount,
    GuestAccelerator,
    NodePoolSpec,
    ResolvedNodePool,
)


def _or_default(value: Any, default: Any) -> Any:
    # Only None means unset; False and 0 are explicit values.
    return default if value is None else value


def resolve_node_pool(spec: NodePoolSpec | Mapping[str, Any]) -> ResolvedNodePool:
    """
    Applies defaults to a single node pool entry and derives the
    accelerator list and node count policy.
    Values are passed through as given: min_count > max_count or negative
    counts are left for the GKE API to reject.
    """
    if not isinstance(spec, NodePoolSpec):
        spec = NodePoolSpec.model_validate(spec)

    accelerator_count = _or_default(spec.accelerator_count, DEFAULT_ACCELERATOR_COUNT)
    autoscaling = _or_default(spec.autoscaling, DEFAULT_AUTOSCALING)
    min_count = _or_default(spec.min_count, DEFAULT_MIN_COUNT)
    max_count = _or_default(spec.max_count, DEFAULT_MAX_COUNT)
    initial_node_count = _or_default(spec.initial_node_count, min_count)

    # The count decides, not whether a type was given
    guest_accelerators = []
    if accelerator_count > 0:
        guest_accelerators.append(
            GuestAccelerator(type=spec.accelerator_type or "", count=accelerator_count)
        )

    policy: FixedNodeCount | AutoscaledNodeCount
    if autoscaling:
        policy = AutoscaledNodeCount(min_count=min_count, max_count=max_count)
    else:
        policy = FixedNodeCount(node_count=initial_node_count)

    resolved = ResolvedNodePool(
        name=spec.name,
        image_type=_or_default(spec.image_type, DEFAULT_IMAGE_TYPE),
        machine_type=_or_default(spec.machine_type, DEFAULT_MACHINE_TYPE),
        disk_size_gb=_or_default(spec.disk_size_gb, DEFAULT_DISK_SIZE_GB),
        disk_type=_or_default(spec.disk_type, DEFAULT_DISK_TYPE),
        preemptible=_or_default(spec.preemptible, DEFAULT_PREEMPTIBLE),
        accelerator_type=spec.accelerator_type,
        accelerator_count=accelerator_count,
        min_count=min_count,
        max_count=max_count,
        initial_node_count=initial_node_count,
        guest_accelerators=guest_accelerators,
        node_count_policy=policy,
    )
    logger.debug(f"Resolved node pool {resolved.name}: {policy.kind}")
    return resolved


def resolve_node_pools(
    specs: Iterable[NodePoolSpec | Mapping[str, Any]],
) -> list[ResolvedNodePool]:
    """Resolves each entry independently, preserving input order."""
    return [resolve_node_pool(spec) for spec in specs]
