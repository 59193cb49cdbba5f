from eipflow.application.port import EcsClient, Ui
from eipflow.client import Client
from eipflow.domain.entity import EipConfig
from eipflow.infrastructure.adapter.in_memory.client import create as create_in_memory_pipeline


def create(ecs_client: EcsClient, ui: Ui | None = None, config: dict | EipConfig | None = None) -> Client:
    """
    Factory function to create a Client running steps in the current process.

    Args:
        ecs_client: The cloud client the steps talk to
        ui: Optional output sink; messages are recorded in memory when omitted
        config: Optional EIP step configuration; when given, the steps it asks for are pre-registered

    Returns:
        A configured Client instance

    Raises:
        ValueError: If the configuration is invalid
    """
    pipeline = create_in_memory_pipeline(ecs_client, ui=ui, config=config)
    return Client(
        runner=pipeline.runner,
        ecs_client=pipeline.ecs_client,
        ui=pipeline.ui,
        steps=pipeline.steps,
    )
