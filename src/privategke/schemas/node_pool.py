from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NodePoolSpec(BaseModel):
    """
    A node pool entry as supplied by the caller.
    Unset fields stay None so the resolver can tell them apart from
    explicit values.
    """

    model_config = ConfigDict(extra="ignore")

    name: str
    image_type: str | None = None
    machine_type: str | None = None
    disk_size_gb: int | None = None
    disk_type: str | None = None
    preemptible: bool | None = None
    accelerator_type: str | None = None
    accelerator_count: int | None = None
    autoscaling: bool | None = None
    min_count: int | None = None
    max_count: int | None = None
    initial_node_count: int | None = None


class GuestAccelerator(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = Field(description="e.g., nvidia-tesla-t4")
    count: int


class FixedNodeCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    node_count: int


class AutoscaledNodeCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["autoscaled"] = "autoscaled"
    min_count: int
    max_count: int


NodeCountPolicy = Annotated[
    FixedNodeCount | AutoscaledNodeCount, Field(discriminator="kind")
]


class ResolvedNodePool(BaseModel):
    """
    A node pool with every default applied.
    Whether the pool autoscales is carried only by node_count_policy.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    image_type: str
    machine_type: str
    disk_size_gb: int
    disk_type: str
    preemptible: bool
    accelerator_type: str | None = None
    accelerator_count: int
    min_count: int
    max_count: int
    initial_node_count: int
    guest_accelerators: tuple[GuestAccelerator, ...] = ()
    node_count_policy: NodeCountPolicy

    @model_validator(mode="after")
    def _check_policy_matches_counts(self) -> "ResolvedNodePool":
        policy = self.node_count_policy
        if isinstance(policy, AutoscaledNodeCount):
            if (policy.min_count, policy.max_count) != (self.min_count, self.max_count):
                raise ValueError("autoscaling bounds do not match min_count/max_count")
        elif policy.node_count != self.initial_node_count:
            raise ValueError("fixed node_count does not match initial_node_count")
        return self

    @property
    def autoscaling(self) -> bool:
        return isinstance(self.node_count_policy, AutoscaledNodeCount)

    @property
    def node_count(self) -> int | None:
        """Static node count, or None when an autoscaler owns the count."""
        if isinstance(self.node_count_policy, FixedNodeCount):
            return self.node_count_policy.node_count
        return None

    @property
    def autoscaling_bounds(self) -> dict[str, int] | None:
        if isinstance(self.node_count_policy, AutoscaledNodeCount):
            return {
                "min": self.node_count_policy.min_count,
                "max": self.node_count_policy.max_count,
            }
        return None

    def to_dict(self) -> dict[str, Any]:
        """
        Flat mapping handed to the provisioning layer.
        Carries either 'node_count' or 'autoscaling_bounds', never both.
        """
        data: dict[str, Any] = {
            "name": self.name,
            "image_type": self.image_type,
            "machine_type": self.machine_type,
            "disk_size_gb": self.disk_size_gb,
            "disk_type": self.disk_type,
            "preemptible": self.preemptible,
            "guest_accelerators": [a.model_dump() for a in self.guest_accelerators],
        }
        if self.node_count is not None:
            data["node_count"] = self.node_count
        else:
            data["autoscaling_bounds"] = self.autoscaling_bounds
        return data

    def to_spec(self) -> NodePoolSpec:
        """Returns the fully specified input that resolves back to this pool."""
        return NodePoolSpec(
            name=self.name,
            image_type=self.image_type,
            machine_type=self.machine_type,
            disk_size_gb=self.disk_size_gb,
            disk_type=self.disk_type,
            preemptible=self.preemptible,
            accelerator_type=self.accelerator_type,
            accelerator_count=self.accelerator_count,
            autoscaling=self.autoscaling,
            min_count=self.min_count,
            max_count=self.max_count,
            initial_node_count=self.initial_node_count,
        )
