class EipError(Exception):
    """Base error for EIP provisioning failures."""


class PrivateIpNotFoundError(EipError):
    """The instance has no private address to reach it by."""


class EipAllocationError(EipError):
    """Allocating a new EIP failed."""


class EipAssociationError(EipError):
    """Binding an EIP to an instance failed."""


class EipWaitTimeoutError(EipError):
    """An EIP did not reach the requested status in time."""

    def __init__(self, allocation_id: str, status: str, timeout: float):
        self.allocation_id = allocation_id
        self.status = status
        self.timeout = timeout
        super().__init__(f"Timeout waiting for eip {allocation_id} to become {status} after {timeout}s")


class StepCancelledError(EipError):
    """The run was cancelled while a step was waiting."""
