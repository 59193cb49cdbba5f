from typing import Any


class Step:
    """Base class for all pipeline steps. Enforces 'run' and 'cleanup' methods."""

    def __init_subclass__(cls, **kwargs):
        """Ensures the subclass defines both the forward and the teardown action."""
        super().__init_subclass__(**kwargs)

        for method in ("run", "cleanup"):
            if method not in cls.__dict__:
                raise TypeError(f"{cls.__name__} must define a '{method}' method")

    def run(self, state: Any) -> Any:
        """Forward action; returns a StepOutcome."""
        raise NotImplementedError("Steps must implement the run method")

    def cleanup(self, state: Any) -> None:
        """Teardown action, called for every step that ran."""
        raise NotImplementedError("Steps must implement the cleanup method")
