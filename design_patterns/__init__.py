"""Design Patterns Showcase - Root Package.

This package enumerates common object-oriented and reactive design patterns
and exercises each one from a linear demonstration routine that prints
labeled output to the console.

Key Components:
    - domain: Entities, outcome type, specifications, events and ports
    - application: Mediator messages, pipeline, exporters and demo sections
    - infrastructure: DI container, repositories, event aggregator, logging
    - config: Settings schemas, options wrapper and configuration manager
    - cli: Command-line entry point

Architecture:
    The layout follows Clean Architecture principles with clear separation
    between domain logic, application services, and infrastructure concerns.
"""

__version__ = "1.0.0"
PACKAGE_NAME = "design-patterns"

__package_name__ = PACKAGE_NAME

"""
Usage:
    >>> python -m design_patterns
    >>> design-patterns --section Pipeline --section Result
"""
