from typing import Literal

import msgspec

from eipflow.domain.value_object import (
    DEFAULT_SHORT_TIMEOUT,
    EipStatus,
    InternetChargeType,
    RunStatus,
    StepAction,
)


class Instance(msgspec.Struct, forbid_unknown_fields=True):
    """Descriptor of a compute instance created by an earlier pipeline step."""

    instance_id: str
    private_ip_addresses: list[str] = msgspec.field(default_factory=list)


class EipConfig(msgspec.Struct, kw_only=True, frozen=True, forbid_unknown_fields=True):
    """Configuration of the EIP step.

    When ``ssh_private_ip`` is set the instance's first private address is used
    and no EIP is allocated; the charge type and bandwidth are then ignored.
    """

    region_id: str = ""
    ssh_private_ip: bool = False
    associate_public_ip_address: bool = False
    internet_charge_type: str = InternetChargeType.PAY_BY_TRAFFIC.value
    internet_max_bandwidth_out: int = 0
    wait_timeout: float = DEFAULT_SHORT_TIMEOUT


class StepOutcome(msgspec.Struct, tag_field="action"):
    """Result of running the forward action of a step."""


class Continue(StepOutcome, tag=StepAction.CONTINUE.value):
    """The step succeeded; the pipeline moves on."""


class Halt(StepOutcome, tag=StepAction.HALT.value):
    """The step failed; no further steps run."""

    error: str | None = None


class EipAddress(msgspec.Struct, kw_only=True):
    """Provider-side record of one allocated EIP."""

    allocation_id: str
    ip_address: str
    region_id: str
    status: EipStatus = EipStatus.AVAILABLE
    instance_id: str | None = None
    internet_charge_type: str = InternetChargeType.PAY_BY_TRAFFIC.value
    bandwidth: int = 0


class StepRecord(msgspec.Struct, forbid_unknown_fields=True):
    """What happened to one step during a run."""

    name: str
    action: Literal["continue", "halt"]
    error: str | None = None


class RunResult(msgspec.Struct, forbid_unknown_fields=True):
    """Result of running a pipeline of steps, including status and the resolved address."""

    id: str
    status: RunStatus
    steps: list[StepRecord]
    ipaddress: str | None = None
    error: str | None = None

    def to_dict(self):
        """Convert the RunResult to a dictionary."""
        return msgspec.to_builtins(self)

    def to_json(self) -> str:
        """Convert the RunResult to a JSON string."""
        return msgspec.json.encode(self).decode()

    def to_yaml(self) -> str:
        """Convert the RunResult to a YAML string."""
        return msgspec.yaml.encode(self).decode()
