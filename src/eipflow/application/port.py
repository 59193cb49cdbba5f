import threading
from abc import ABC, abstractmethod
from typing import Any

from waiting import TimeoutExpired, wait

from eipflow.domain.entity import RunResult
from eipflow.domain.error import EipWaitTimeoutError, StepCancelledError
from eipflow.domain.port import Step
from eipflow.domain.value_object import EipStatus


class EcsClient(ABC):
    """Abstract interface of the cloud client the EIP step talks to.

    Remote failures are raised as exceptions.
    """

    poll_interval: float = 2.0

    @abstractmethod
    def allocate_eip_address(self, region_id: str, internet_charge_type: str, bandwidth: int) -> tuple[str, str]:
        """
        Allocate a new EIP.

        Args:
            region_id: Region to allocate the address in
            internet_charge_type: Billing model of the address
            bandwidth: Maximum outbound bandwidth in Mbps, 0 for the provider default

        Returns:
            The address and its allocation id
        """

    @abstractmethod
    def associate_eip_address(self, allocation_id: str, instance_id: str) -> None:
        """Bind an allocated EIP to an instance."""

    @abstractmethod
    def unassociate_eip_address(self, allocation_id: str, instance_id: str) -> None:
        """Unbind an EIP from an instance."""

    @abstractmethod
    def release_eip_address(self, allocation_id: str) -> None:
        """Release an EIP back to the provider."""

    @abstractmethod
    def describe_eip_status(self, region_id: str, allocation_id: str) -> EipStatus:
        """Return the current status of an EIP."""

    def wait_for_eip(
        self,
        region_id: str,
        allocation_id: str,
        status: EipStatus,
        timeout: float,
        cancel: threading.Event | None = None,
    ) -> None:
        """
        Block until the EIP reaches the given status.

        Args:
            region_id: Region of the address
            allocation_id: Allocation id of the address
            status: Status to wait for
            timeout: Seconds to wait before giving up
            cancel: Optional event; when set, waiting stops with StepCancelledError

        Raises:
            EipWaitTimeoutError: If the status is not reached in time
            StepCancelledError: If the cancel event is set while waiting
        """

        def reached() -> bool:
            if cancel is not None and cancel.is_set():
                raise StepCancelledError(f"Cancelled while waiting for eip {allocation_id}")
            return self.describe_eip_status(region_id, allocation_id) == status

        try:
            wait(
                reached,
                timeout_seconds=timeout,
                sleep_seconds=self.poll_interval,
                waiting_for=f"eip {allocation_id} to become {status.value}",
            )
        except TimeoutExpired:
            raise EipWaitTimeoutError(allocation_id, status.value, timeout) from None


class Ui(ABC):
    """Abstract user-visible output sink."""

    @abstractmethod
    def say(self, message: str) -> None:
        """Show a progress or diagnostic message."""


class StepRunner(ABC):
    """Abstract runner driving steps forward and tearing them down."""

    @abstractmethod
    def run(self, steps: list[Step], state: Any, run_id: str | None = None) -> RunResult:
        """
        Run the steps in order, then clean up the ones that ran in reverse order.

        Args:
            steps: The steps to run
            state: The shared StepState
            run_id: Optional identifier of the run; generated when omitted

        Returns:
            The result of the run
        """
        ...
