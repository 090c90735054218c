"""Domain base package - entities, events, specifications and ports."""
from .entity import Entity
from .events import DomainEvent
from .specification import (
    AndSpecification,
    CriteriaSpecification,
    NotSpecification,
    OrSpecification,
    PredicateSpecification,
    Specification,
)

__all__ = [
    "Entity",
    "DomainEvent",
    "Specification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "PredicateSpecification",
    "CriteriaSpecification",
]
