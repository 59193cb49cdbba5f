import ipaddress
import logging
import uuid

from eipflow.application.port import EcsClient
from eipflow.domain.entity import EipAddress
from eipflow.domain.value_object import EipStatus

logger = logging.getLogger(__name__)


class InMemoryEcsClient(EcsClient):
    """EcsClient that keeps EIPs in memory.

    Status changes triggered by associate/unassociate are applied after
    ``transition_polls`` status reads, so waiting for a status is exercised the
    way it is against a real provider. Operations listed in ``failures`` raise
    the given exception instead of running.
    """

    def __init__(
        self,
        network: str = "47.100.0.0/16",
        transition_polls: int = 1,
        poll_interval: float = 0.0,
        failures: dict[str, Exception] | None = None,
    ):
        self._hosts = ipaddress.ip_network(network).hosts()
        self.transition_polls = transition_polls
        self.poll_interval = poll_interval
        self.failures = failures if failures is not None else {}
        self.addresses: dict[str, EipAddress] = {}
        self._pending: dict[str, tuple[EipStatus, int]] = {}

    def allocate_eip_address(self, region_id: str, internet_charge_type: str, bandwidth: int) -> tuple[str, str]:
        self._maybe_fail("allocate_eip_address")
        try:
            ip = str(next(self._hosts))
        except StopIteration:
            raise RuntimeError("No eip addresses left to allocate") from None
        allocation_id = f"eip-{uuid.uuid4().hex[:20]}"
        self.addresses[allocation_id] = EipAddress(
            allocation_id=allocation_id,
            ip_address=ip,
            region_id=region_id,
            internet_charge_type=internet_charge_type,
            bandwidth=bandwidth,
        )
        logger.debug("Allocated %s as %s", ip, allocation_id)
        return ip, allocation_id

    def associate_eip_address(self, allocation_id: str, instance_id: str) -> None:
        self._maybe_fail("associate_eip_address")
        eip = self._get(allocation_id)
        if eip.status != EipStatus.AVAILABLE:
            raise RuntimeError(f"Eip {allocation_id} is {eip.status.value}, cannot associate")
        eip.instance_id = instance_id
        self._transition(eip, EipStatus.ASSOCIATING, EipStatus.IN_USE)

    def unassociate_eip_address(self, allocation_id: str, instance_id: str) -> None:
        self._maybe_fail("unassociate_eip_address")
        eip = self._get(allocation_id)
        if eip.instance_id != instance_id:
            raise RuntimeError(f"Eip {allocation_id} is not associated with {instance_id}")
        eip.instance_id = None
        self._transition(eip, EipStatus.UNASSOCIATING, EipStatus.AVAILABLE)

    def release_eip_address(self, allocation_id: str) -> None:
        self._maybe_fail("release_eip_address")
        eip = self._get(allocation_id)
        if eip.status != EipStatus.AVAILABLE:
            raise RuntimeError(f"Eip {allocation_id} is {eip.status.value}, cannot release")
        del self.addresses[allocation_id]
        self._pending.pop(allocation_id, None)

    def describe_eip_status(self, region_id: str, allocation_id: str) -> EipStatus:
        self._maybe_fail("describe_eip_status")
        eip = self._get(allocation_id)
        if eip.region_id != region_id:
            raise KeyError(f"Eip {allocation_id} not found in region {region_id}")
        if allocation_id in self._pending:
            target, remaining = self._pending[allocation_id]
            if remaining <= 0:
                eip.status = target
                del self._pending[allocation_id]
            else:
                self._pending[allocation_id] = (target, remaining - 1)
        return eip.status

    def _transition(self, eip: EipAddress, interim: EipStatus, target: EipStatus) -> None:
        if self.transition_polls <= 0:
            eip.status = target
            return
        eip.status = interim
        self._pending[eip.allocation_id] = (target, self.transition_polls)

    def _get(self, allocation_id: str) -> EipAddress:
        try:
            return self.addresses[allocation_id]
        except KeyError:
            raise KeyError(f"No eip with allocation id '{allocation_id}'") from None

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.failures:
            raise self.failures[operation]
