"""
Step pipeline - ordered units of work applied to a shared context.

Steps run synchronously in registration order and each one sees the
mutations of every step before it. A step may mutate the context in place
and return None, or return a replacement context that later steps receive.
Any other return value fails the step that produced it.

    pipeline = Pipeline().add_step(lambda c: setattr(c, "data", c.data + 1))
    ctx = pipeline.execute(PipelineContext(data=1))  # ctx.data == 2
"""
from enum import Enum
from typing import Callable, List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict

from design_patterns.domain.core.exceptions import PipelineStateError, PipelineStepError
from design_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class PipelineContext(BaseModel):
    """Mutable state bag passed through the pipeline; extra fields are allowed."""
    model_config = ConfigDict(extra="allow", validate_assignment=True)

    data: int = 0


Step = Callable[[PipelineContext], Optional[PipelineContext]]


class PipelineState(str, Enum):
    BUILDING = "building"
    EXECUTING = "executing"
    DONE = "done"


class RegisteredStep(NamedTuple):
    name: str
    func: Step


class Pipeline:
    """Ordered sequence of steps executed against one context at a time."""

    def __init__(self, name: str = "pipeline"):
        self.name = name
        self._steps: List[RegisteredStep] = []
        self._state = PipelineState.BUILDING

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def steps(self) -> List[RegisteredStep]:
        return list(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def add_step(self, step: Step, name: Optional[str] = None) -> "Pipeline":
        """
        Append a step.

        Args:
            step: Callable receiving the context
            name: Label used in logs and errors; defaults to the callable's name

        Returns:
            The pipeline, for chaining

        Raises:
            PipelineStateError: If called while the pipeline is executing
        """
        if self._state is PipelineState.EXECUTING:
            raise PipelineStateError(self._state.value, "add a step")
        step_name = name or getattr(step, "__name__", None) or repr(step)
        self._steps.append(RegisteredStep(step_name, step))
        self._state = PipelineState.BUILDING
        return self

    def execute(self, context: PipelineContext) -> PipelineContext:
        """
        Run every step against the context, in registration order.

        Args:
            context: Initial context

        Returns:
            The final context

        Raises:
            PipelineStepError: If a step raises; later steps are not run
            PipelineStateError: If the pipeline is already executing
        """
        if self._state is PipelineState.EXECUTING:
            raise PipelineStateError(self._state.value, "execute")

        self._state = PipelineState.EXECUTING
        logger.debug(f"Executing {self.name} with {len(self._steps)} steps")
        try:
            for index, step in enumerate(self._steps):
                try:
                    result = step.func(context)
                except Exception as e:
                    logger.error(
                        f"Step {index} ({step.name}) of {self.name} failed: {str(e)}"
                    )
                    raise PipelineStepError(index, step.name, e) from e
                if result is None:
                    continue
                if not isinstance(result, PipelineContext):
                    error = TypeError(
                        f"step returned {type(result).__name__}; "
                        f"expected None or PipelineContext"
                    )
                    logger.error(f"Step {index} ({step.name}) of {self.name} failed: {str(error)}")
                    raise PipelineStepError(index, step.name, error)
                context = result
        finally:
            self._state = PipelineState.DONE
        return context
