import threading

from eipflow.application.adapter import StepState
from eipflow.application.port import EcsClient, StepRunner, Ui
from eipflow.application.service import load_instance
from eipflow.domain.entity import Instance, RunResult
from eipflow.domain.port import Step


class Client:
    """
    Client façade for running addressing steps against an instance.

    Holds the runner, the cloud client and the UI sink; the steps to run are
    registered with .step() or pre-populated by the factory.
    """

    def __init__(self, runner: StepRunner, ecs_client: EcsClient, ui: Ui, steps: list[Step] | None = None):
        """
        Initialize the client.

        Args:
            runner: The step runner implementation (e.g., InMemoryStepRunner)
            ecs_client: The cloud client handed to the steps
            ui: The output sink handed to the steps
            steps: Optional steps to pre-register
        """
        self._runner = runner
        self._ecs_client = ecs_client
        self._ui = ui
        self._steps: list[Step] = list(steps or [])

    @property
    def steps(self) -> list[Step]:
        return list(self._steps)

    def step(self, step: Step) -> "Client":
        """
        Register a step with the client.

        Args:
            step: The step instance to append

        Returns:
            The client instance for method chaining
        """
        if not isinstance(step, Step):
            raise TypeError(f"Expected a Step, got {type(step).__name__}")
        self._steps.append(step)
        return self

    def run(self, instance: dict | Instance, cancel_event: threading.Event | None = None) -> RunResult:
        """
        Run the registered steps for an instance.

        Args:
            instance: The instance descriptor, as a dictionary or an Instance
            cancel_event: Optional event the caller sets to cancel the run

        Returns:
            The run result
        """
        state = StepState(client=self._ecs_client, ui=self._ui, instance=load_instance(instance))
        if cancel_event is not None:
            state.cancel_event = cancel_event
        return self._runner.run(self._steps, state)
