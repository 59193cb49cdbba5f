from eipflow.application.port import EcsClient, Ui
from eipflow.application.service import build_steps, load_config
from eipflow.domain.entity import EipConfig
from eipflow.infrastructure.adapter.in_memory.step_runner import InMemoryStepRunner
from eipflow.infrastructure.adapter.in_memory.ui import InMemoryUi


class InMemoryPipeline:
    """Wiring of a runner, collaborators and the steps built from a configuration."""

    def __init__(self, runner: InMemoryStepRunner, ecs_client: EcsClient, ui: Ui, steps: list):
        self.runner = runner
        self.ecs_client = ecs_client
        self.ui = ui
        self.steps = steps


def create(ecs_client: EcsClient, ui: Ui | None = None, config: dict | EipConfig | None = None) -> InMemoryPipeline:
    steps = build_steps(load_config(config)) if config is not None else []
    return InMemoryPipeline(
        runner=InMemoryStepRunner(),
        ecs_client=ecs_client,
        ui=ui if ui is not None else InMemoryUi(),
        steps=steps,
    )
