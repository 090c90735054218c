# design_patterns/domain/core/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class OutcomeAccessError(DomainException):
    """Raised when reading the wrong side of an outcome."""
    def __init__(self, variant: str, attempted: str):
        super().__init__(f"Cannot read {attempted} of a {variant} outcome")
        self.variant = variant
        self.attempted = attempted


class PipelineError(DomainException):
    """Base exception for pipeline execution errors."""
    pass


class PipelineStepError(PipelineError):
    """Raised when a pipeline step fails; the run is aborted."""
    def __init__(self, step_index: int, step_name: str, cause: BaseException):
        super().__init__(
            f"Pipeline step {step_index} ({step_name}) failed: {cause}"
        )
        self.step_index = step_index
        self.step_name = step_name
        self.cause = cause


class PipelineStateError(PipelineError):
    """Raised when a pipeline is modified in a state that forbids it."""
    def __init__(self, current_state: str, operation: str):
        super().__init__(f"Cannot {operation} while pipeline is {current_state}")
        self.current_state = current_state
        self.operation = operation


class HandlerNotFoundError(DomainException):
    """Raised when no handler is registered for a message type."""
    def __init__(self, message_type: str):
        super().__init__(f"No handler registered for {message_type}")
        self.message_type = message_type


class UnknownSectionError(DomainException):
    """Raised when a demonstration section name is not recognised."""
    def __init__(self, section: str, available: List[str]):
        super().__init__(
            f"Unknown section '{section}'. Available: {', '.join(available)}"
        )
        self.section = section
        self.available = available
