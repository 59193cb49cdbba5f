from enum import Enum

# Seconds to wait for an EIP to settle into a requested status.
DEFAULT_SHORT_TIMEOUT = 180


class EipStatus(str, Enum):
    ASSOCIATING = "Associating"
    UNASSOCIATING = "Unassociating"
    IN_USE = "InUse"
    AVAILABLE = "Available"


class InternetChargeType(str, Enum):
    PAY_BY_BANDWIDTH = "PayByBandwidth"
    PAY_BY_TRAFFIC = "PayByTraffic"


class StepAction(str, Enum):
    CONTINUE = "continue"
    HALT = "halt"


class RunStatus(str, Enum):
    SUCCESS = "success"
    HALTED = "halted"
    CANCELLED = "cancelled"
