"""
eipflow - EIP provisioning step for image-building pipelines

Allocates and binds a reachable address for a freshly created instance, or
reuses its private address, and releases what it allocated on teardown.
"""

from eipflow.application.adapter import StepConfigEip, StepState
from eipflow.client import Client
from eipflow.domain.entity import EipConfig, Instance, RunResult
from eipflow.domain.port import Step
from eipflow.factory import create

__all__ = [
    "Client",
    "create",
    "EipConfig",
    "Instance",
    "RunResult",
    "Step",
    "StepConfigEip",
    "StepState",
]
