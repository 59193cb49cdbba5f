import logging
import uuid

from eipflow.application.adapter import StepState
from eipflow.application.port import StepRunner
from eipflow.domain.entity import Halt, RunResult, StepRecord
from eipflow.domain.port import Step
from eipflow.domain.value_object import RunStatus, StepAction

logger = logging.getLogger(__name__)


class UUIDGenerator:
    def generate(self) -> str:
        return uuid.uuid4().hex


class InMemoryStepRunner(StepRunner):
    """Runs steps one after another in the current thread."""

    def __init__(self, id_generator: UUIDGenerator | None = None):
        self.id_generator = id_generator if id_generator is not None else UUIDGenerator()

    def run(self, steps: list[Step], state: StepState, run_id: str | None = None) -> RunResult:
        """Runs each step in order and then cleans up every step that ran, last first."""
        records: list[StepRecord] = []
        ran: list[Step] = []
        error_msg = None
        for step in steps:
            if state.cancelled:
                break
            name = getattr(step, "step_name", type(step).__name__)
            ran.append(step)
            try:
                outcome = step.run(state)
            except Exception as e:
                # Fatal failure
                logger.exception("Step %s raised", name)
                state.error = e
                outcome = Halt(error=str(e))
            if isinstance(outcome, Halt):
                state.halted = True
                error_msg = outcome.error
                records.append(StepRecord(name=name, action=StepAction.HALT.value, error=outcome.error))
                break
            records.append(StepRecord(name=name, action=StepAction.CONTINUE.value))

        for step in reversed(ran):
            try:
                step.cleanup(state)
            except Exception:
                logger.exception("Cleanup of %s failed", getattr(step, "step_name", type(step).__name__))

        if state.cancelled:
            status = RunStatus.CANCELLED
        elif state.halted:
            status = RunStatus.HALTED
        else:
            status = RunStatus.SUCCESS
        if run_id is None:
            run_id = self.id_generator.generate()
        return RunResult(
            id=run_id,
            status=status,
            steps=records,
            ipaddress=state.ipaddress if status == RunStatus.SUCCESS else None,
            error=error_msg,
        )
