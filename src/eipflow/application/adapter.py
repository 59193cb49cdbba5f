import logging
import threading
from dataclasses import dataclass, field

from eipflow.application.port import EcsClient, Ui
from eipflow.domain.entity import Continue, EipConfig, Halt, Instance, StepOutcome
from eipflow.domain.error import (
    EipAllocationError,
    EipAssociationError,
    PrivateIpNotFoundError,
)
from eipflow.domain.port import Step
from eipflow.domain.value_object import EipStatus

logger = logging.getLogger(__name__)


@dataclass
class StepState:
    """Typed state shared by the steps of one pipeline run."""

    client: EcsClient
    ui: Ui
    instance: Instance | None = None
    ipaddress: str | None = None
    error: Exception | None = None
    halted: bool = False
    cancel_event: threading.Event = field(default_factory=threading.Event)

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()


def message(state: StepState, module: str) -> None:
    """Announces the teardown of a resource, saying why it is being removed."""
    if state.cancelled or state.halted:
        state.ui.say(f"Deleting {module} because of cancellation or error...")
    else:
        state.ui.say(f"Cleaning up '{module}'")


class StepConfigEip(Step):
    """Resolves a reachable address for the instance.

    Either reuses the instance's first private address, or allocates a new EIP
    and binds it to the instance. Cleanup unbinds and releases the EIP, and only
    does so if one was allocated.
    """

    step_name = "config_eip"

    def __init__(self, config: EipConfig):
        self.config = config
        self.allocated_id = ""

    def run(self, state: StepState) -> StepOutcome:
        self.allocated_id = ""
        client = state.client
        ui = state.ui
        instance = self._instance(state)

        if self.config.ssh_private_ip:
            if not instance.private_ip_addresses:
                err = PrivateIpNotFoundError(f"Instance {instance.instance_id} has no private ip address")
                state.error = err
                ui.say("Failed to get private ip of instance")
                return Halt(error=str(err))
            state.ipaddress = instance.private_ip_addresses[0]
            logger.debug("Using private ip %s of instance %s", state.ipaddress, instance.instance_id)
            return Continue()

        region_id = self.config.region_id
        timeout = self.config.wait_timeout

        ui.say("Allocating eip")
        try:
            ipaddress, allocation_id = client.allocate_eip_address(
                region_id,
                self.config.internet_charge_type,
                self.config.internet_max_bandwidth_out,
            )
        except Exception as e:
            return self._halt(state, EipAllocationError(str(e)), "Error allocating eip", cause=e)
        self.allocated_id = allocation_id
        logger.info("Allocated eip %s (%s) in %s", ipaddress, allocation_id, region_id)

        try:
            client.wait_for_eip(region_id, allocation_id, EipStatus.AVAILABLE, timeout, cancel=state.cancel_event)
        except Exception as e:
            return self._halt(state, e, "Error allocating eip")

        try:
            client.associate_eip_address(allocation_id, instance.instance_id)
        except Exception as e:
            return self._halt(state, EipAssociationError(str(e)), "Error binding eip", cause=e)

        try:
            client.wait_for_eip(region_id, allocation_id, EipStatus.IN_USE, timeout, cancel=state.cancel_event)
        except Exception as e:
            return self._halt(state, e, "Error associating eip")

        ui.say(f"Allocated eip {ipaddress}")
        state.ipaddress = ipaddress
        return Continue()

    def cleanup(self, state: StepState) -> None:
        if not self.allocated_id:
            return

        client = state.client
        ui = state.ui

        message(state, "EIP")

        try:
            client.unassociate_eip_address(self.allocated_id, self._instance(state).instance_id)
        except Exception as e:
            logger.warning("Failed to unassociate eip %s: %s", self.allocated_id, e)
            ui.say("Failed to unassociate eip.")

        try:
            client.wait_for_eip(
                self.config.region_id, self.allocated_id, EipStatus.AVAILABLE, self.config.wait_timeout
            )
        except Exception as e:
            logger.warning("Eip %s did not become available: %s", self.allocated_id, e)
            ui.say("Timeout while unassociating eip.")

        try:
            client.release_eip_address(self.allocated_id)
        except Exception as e:
            logger.warning("Failed to release eip %s: %s", self.allocated_id, e)
            ui.say("Failed to release eip.")

        self.allocated_id = ""

    @staticmethod
    def _instance(state: StepState) -> Instance:
        if state.instance is None:
            raise ValueError("StepConfigEip requires an instance in the step state")
        return state.instance

    @staticmethod
    def _halt(state: StepState, err: Exception, prefix: str, cause: Exception | None = None) -> Halt:
        if cause is not None:
            err.__cause__ = cause
        state.error = err
        logger.error("%s: %s", prefix, err)
        state.ui.say(f"{prefix}: {err}")
        return Halt(error=str(err))
