"""Core domain primitives shared across the showcase."""
from design_patterns.domain.core.exceptions import (
    ConfigurationError,
    DomainException,
    HandlerNotFoundError,
    OutcomeAccessError,
    PipelineError,
    PipelineStateError,
    PipelineStepError,
    UnknownSectionError,
    ValidationError,
)
from design_patterns.domain.core.result import Failure, Outcome, Success, failure, success
from design_patterns.domain.core.sequences import numbers

__all__ = [
    "ConfigurationError",
    "DomainException",
    "HandlerNotFoundError",
    "OutcomeAccessError",
    "PipelineError",
    "PipelineStateError",
    "PipelineStepError",
    "UnknownSectionError",
    "ValidationError",
    "Failure",
    "Outcome",
    "Success",
    "failure",
    "success",
    "numbers",
]
