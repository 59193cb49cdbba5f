"""
Tests for the in-memory EcsClient.
"""

import pytest

from eipflow.domain.error import EipWaitTimeoutError
from eipflow.domain.value_object import EipStatus
from eipflow.infrastructure.adapter.in_memory.ecs_client import InMemoryEcsClient

REGION = "cn-hangzhou"


class TestInMemoryEcsClient:
    """Test cases for InMemoryEcsClient."""

    def setup_method(self):
        self.client = InMemoryEcsClient(network="47.100.0.0/29")

    def test_allocate(self):
        """Test allocation returns an address from the network and records it."""
        ip, allocation_id = self.client.allocate_eip_address(REGION, "PayByTraffic", 5)

        assert ip == "47.100.0.1"
        assert allocation_id.startswith("eip-")
        eip = self.client.addresses[allocation_id]
        assert eip.region_id == REGION
        assert eip.bandwidth == 5
        assert eip.status == EipStatus.AVAILABLE

    def test_allocate_unique(self):
        ids = {self.client.allocate_eip_address(REGION, "PayByTraffic", 0)[1] for _ in range(3)}

        assert len(ids) == 3

    def test_allocate_exhausted(self):
        """Test allocation fails when the network has no hosts left."""
        client = InMemoryEcsClient(network="47.100.0.0/30")
        client.allocate_eip_address(REGION, "PayByTraffic", 0)
        client.allocate_eip_address(REGION, "PayByTraffic", 0)

        with pytest.raises(RuntimeError, match="No eip addresses left"):
            client.allocate_eip_address(REGION, "PayByTraffic", 0)

    def test_associate_transitions_to_in_use(self):
        """Test association passes through Associating before InUse."""
        _, allocation_id = self.client.allocate_eip_address(REGION, "PayByTraffic", 0)

        self.client.associate_eip_address(allocation_id, "i-1")

        assert self.client.describe_eip_status(REGION, allocation_id) == EipStatus.ASSOCIATING
        assert self.client.describe_eip_status(REGION, allocation_id) == EipStatus.IN_USE
        assert self.client.addresses[allocation_id].instance_id == "i-1"

    def test_immediate_transitions(self):
        client = InMemoryEcsClient(transition_polls=0)
        _, allocation_id = client.allocate_eip_address(REGION, "PayByTraffic", 0)

        client.associate_eip_address(allocation_id, "i-1")

        assert client.describe_eip_status(REGION, allocation_id) == EipStatus.IN_USE

    def test_associate_twice_fails(self):
        _, allocation_id = self.client.allocate_eip_address(REGION, "PayByTraffic", 0)
        self.client.associate_eip_address(allocation_id, "i-1")

        with pytest.raises(RuntimeError, match="cannot associate"):
            self.client.associate_eip_address(allocation_id, "i-2")

    def test_unassociate_wrong_instance(self):
        _, allocation_id = self.client.allocate_eip_address(REGION, "PayByTraffic", 0)
        self.client.associate_eip_address(allocation_id, "i-1")

        with pytest.raises(RuntimeError, match="not associated"):
            self.client.unassociate_eip_address(allocation_id, "i-2")

    def test_full_lifecycle(self):
        """Test allocate, bind, unbind and release using the wait primitive."""
        _, allocation_id = self.client.allocate_eip_address(REGION, "PayByTraffic", 0)
        self.client.wait_for_eip(REGION, allocation_id, EipStatus.AVAILABLE, timeout=1)
        self.client.associate_eip_address(allocation_id, "i-1")
        self.client.wait_for_eip(REGION, allocation_id, EipStatus.IN_USE, timeout=1)
        self.client.unassociate_eip_address(allocation_id, "i-1")
        self.client.wait_for_eip(REGION, allocation_id, EipStatus.AVAILABLE, timeout=1)

        self.client.release_eip_address(allocation_id)

        assert self.client.addresses == {}

    def test_release_in_use_fails(self):
        """Test a bound eip cannot be released."""
        _, allocation_id = self.client.allocate_eip_address(REGION, "PayByTraffic", 0)
        self.client.associate_eip_address(allocation_id, "i-1")

        with pytest.raises(RuntimeError, match="cannot release"):
            self.client.release_eip_address(allocation_id)

    def test_unknown_allocation(self):
        with pytest.raises(KeyError, match="No eip with allocation id"):
            self.client.release_eip_address("eip-missing")

    def test_wrong_region(self):
        _, allocation_id = self.client.allocate_eip_address(REGION, "PayByTraffic", 0)

        with pytest.raises(KeyError):
            self.client.describe_eip_status("us-west-1", allocation_id)

    def test_wait_times_out_on_slow_transition(self):
        """Test waiting fails when the transition takes longer than the timeout."""
        client = InMemoryEcsClient(transition_polls=10**9)
        _, allocation_id = client.allocate_eip_address(REGION, "PayByTraffic", 0)
        client.associate_eip_address(allocation_id, "i-1")

        with pytest.raises(EipWaitTimeoutError):
            client.wait_for_eip(REGION, allocation_id, EipStatus.IN_USE, timeout=0.05)

    def test_injected_failure(self):
        """Test configured failures are raised instead of running the operation."""
        client = InMemoryEcsClient(failures={"allocate_eip_address": RuntimeError("quota exceeded")})

        with pytest.raises(RuntimeError, match="quota exceeded"):
            client.allocate_eip_address(REGION, "PayByTraffic", 0)

        assert client.addresses == {}
