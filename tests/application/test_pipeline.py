import pytest

from design_patterns.application.pipeline import Pipeline, PipelineContext, PipelineState
from design_patterns.domain.core import PipelineStateError, PipelineStepError


def increment(context):
    context.data += 1


def double(context):
    context.data *= 2


def test_single_increment_step():
    # Arrange
    pipeline = Pipeline()
    pipeline.add_step(increment)
    context = PipelineContext(data=1)

    # Act
    result = pipeline.execute(context)

    # Assert
    assert result.data == 2
    assert context.data == 2
    assert result is context


def test_steps_run_in_registration_order():
    steps = [increment, double, increment, double]
    pipeline = Pipeline()
    for step in steps:
        pipeline.add_step(step)

    by_hand = PipelineContext(data=3)
    for step in steps:
        step(by_hand)

    assert pipeline.execute(PipelineContext(data=3)).data == by_hand.data == 18


def test_each_step_sees_previous_mutations():
    seen = []
    pipeline = (
        Pipeline()
        .add_step(increment)
        .add_step(lambda c: seen.append(c.data))
        .add_step(increment)
        .add_step(lambda c: seen.append(c.data))
    )

    pipeline.execute(PipelineContext(data=0))

    assert seen == [1, 2]


def test_step_may_return_replacement_context():
    pipeline = Pipeline().add_step(lambda c: PipelineContext(data=c.data + 10)).add_step(increment)

    result = pipeline.execute(PipelineContext(data=1))

    assert result.data == 12


def test_duplicate_and_noop_steps_are_allowed():
    pipeline = Pipeline().add_step(increment).add_step(increment).add_step(lambda c: None)

    assert len(pipeline) == 3
    assert pipeline.execute(PipelineContext(data=0)).data == 2


def test_empty_pipeline_returns_context_unchanged():
    context = PipelineContext(data=7)

    assert Pipeline().execute(context) is context
    assert context.data == 7


def test_context_accepts_extra_state():
    context = PipelineContext(data=1, label="x")

    Pipeline().add_step(lambda c: setattr(c, "label", c.label + "y")).execute(context)

    assert context.label == "xy"


def test_failing_step_aborts_and_reports_index():
    # Arrange
    ran_after_failure = []

    def explode(context):
        raise RuntimeError("boom")

    pipeline = (
        Pipeline()
        .add_step(increment)
        .add_step(explode)
        .add_step(lambda c: ran_after_failure.append(True))
    )
    context = PipelineContext(data=0)

    # Act
    with pytest.raises(PipelineStepError) as exc_info:
        pipeline.execute(context)

    # Assert
    assert exc_info.value.step_index == 1
    assert exc_info.value.step_name == "explode"
    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert ran_after_failure == []
    assert context.data == 1
    assert pipeline.state is PipelineState.DONE



def test_step_returning_non_context_fails_that_step():
    # Arrange
    def bump_and_return(context):
        context.data += 1
        return context.data

    pipeline = (
        Pipeline()
        .add_step(bump_and_return)
        .add_step(lambda c: setattr(c, "data", c.data * 10))
    )
    context = PipelineContext(data=1)

    # Act
    with pytest.raises(PipelineStepError) as exc_info:
        pipeline.execute(context)

    # Assert
    assert exc_info.value.step_index == 0
    assert exc_info.value.step_name == "bump_and_return"
    assert isinstance(exc_info.value.cause, TypeError)
    assert context.data == 2
    assert pipeline.state is PipelineState.DONE

def test_explicit_step_name_is_reported():
    def explode(context):
        raise ValueError("bad")

    pipeline = Pipeline().add_step(explode, name="validate")

    with pytest.raises(PipelineStepError) as exc_info:
        pipeline.execute(PipelineContext())

    assert exc_info.value.step_name == "validate"


def test_state_transitions():
    states = []
    pipeline = Pipeline()
    assert pipeline.state is PipelineState.BUILDING

    pipeline.add_step(lambda c: states.append(pipeline.state))
    pipeline.execute(PipelineContext())

    assert states == [PipelineState.EXECUTING]
    assert pipeline.state is PipelineState.DONE


def test_adding_step_while_executing_is_rejected():
    pipeline = Pipeline()
    pipeline.add_step(lambda c: pipeline.add_step(increment))

    with pytest.raises(PipelineStepError) as exc_info:
        pipeline.execute(PipelineContext())

    assert isinstance(exc_info.value.__cause__, PipelineStateError)


def test_pipeline_can_run_again_after_done():
    pipeline = Pipeline().add_step(increment)

    assert pipeline.execute(PipelineContext(data=1)).data == 2
    assert pipeline.execute(PipelineContext(data=5)).data == 6
