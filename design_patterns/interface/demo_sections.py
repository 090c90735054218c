"""Demonstration sections, one per pattern, in canonical order.

Each section resolves what it needs from the container and writes its
result lines to the console. The runner prints the banner.
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable, List, NamedTuple, Optional

from design_patterns.application.export import CsvExporter
from design_patterns.application.order import CreateOrder, OrderCreated
from design_patterns.application.pipeline import Pipeline, PipelineContext
from design_patterns.application.services import MyServicePort
from design_patterns.config.options import Options
from design_patterns.domain.base.ports import ConsolePort, ContainerPort, HttpClientPort, LoggingPort
from design_patterns.domain.core import Outcome, failure, numbers, success
from design_patterns.domain.post import PostByAuthorSpecification, PostRepository
from design_patterns.domain.user import UserCreated
from design_patterns.infrastructure.adapters import NullLogger
from design_patterns.infrastructure.event import EventAggregator
from design_patterns.infrastructure.mediator import Mediator
from design_patterns.infrastructure.middleware import LoggingMiddleware
from design_patterns.infrastructure.reactive import ObservableMock, Observer

SectionRunner = Callable[[ContainerPort], Optional[Awaitable[None]]]


class Section(NamedTuple):
    key: str
    title: str
    run: SectionRunner

    @property
    def banner(self) -> str:
        return f"---- {self.title} ----"


class ConsoleObserver(Observer[Any]):
    """Observer writing every notification to the console."""

    def __init__(self, console: ConsolePort):
        self.console = console

    def on_next(self, value: Any) -> None:
        self.console.write_line(f"Received {value}")

    def on_error(self, error: Exception) -> None:
        self.console.write_line(str(error))

    def on_completed(self) -> None:
        self.console.write_line("Completed")


def show_options(container: ContainerPort) -> None:
    options = container.get(Options)
    container.get(ConsolePort).write_line(options.value.api_key)


def show_dependency_injection(container: ContainerPort) -> None:
    container.get(MyServicePort).do_work()


def show_repository(container: ContainerPort) -> None:
    console = container.get(ConsolePort)
    spec = PostByAuthorSpecification("Tonio")
    for post in container.get(PostRepository).find_by_specification(spec):
        console.write_line(f"Post by {post.author}")


def show_event_aggregator(container: ContainerPort) -> None:
    console = container.get(ConsolePort)
    aggregator = container.get(EventAggregator)
    unsubscribe = aggregator.subscribe(
        UserCreated, lambda e: console.write_line(f"UserCreated {e.user_id}")
    )
    try:
        aggregator.publish(UserCreated(user_id=1))
    finally:
        unsubscribe()


async def show_mediator(container: ContainerPort) -> None:
    mediator = container.get(Mediator)
    await mediator.send(CreateOrder())
    await mediator.publish(OrderCreated())


def describe_outcome(outcome: Outcome[Any]) -> str:
    if outcome.is_success():
        return str(outcome.value)
    return outcome.message


def show_result(container: ContainerPort) -> None:
    console = container.get(ConsolePort)
    ok: Outcome[int] = success(42)
    fail: Outcome[int] = failure("error")
    console.write_line(describe_outcome(ok))
    console.write_line(describe_outcome(fail))


def show_null_object(container: ContainerPort) -> None:
    log: LoggingPort = NullLogger()
    log.log("This won't print")


async def show_async(container: ContainerPort) -> None:
    http = container.get(HttpClientPort)
    data = await http.get_string("url")
    container.get(ConsolePort).write_line(data)


def show_iterator(container: ContainerPort) -> None:
    console = container.get(ConsolePort)
    for n in numbers():
        console.write_line(str(n))


def show_reactive(container: ContainerPort) -> None:
    observable = ObservableMock()
    observable.subscribe(ConsoleObserver(container.get(ConsolePort)))


def show_middleware(container: ContainerPort) -> None:
    middleware = LoggingMiddleware(container.get(ConsolePort))
    middleware.invoke("Request")


def increment(context: PipelineContext) -> None:
    context.data += 1


def show_pipeline(container: ContainerPort) -> None:
    pipeline = Pipeline("demo")
    pipeline.add_step(increment)
    ctx = PipelineContext(data=1)
    ctx = pipeline.execute(ctx)
    container.get(ConsolePort).write_line(str(ctx.data))


def show_template_method(container: ContainerPort) -> None:
    exporter = CsvExporter(container.get(ConsolePort))
    exporter.export("Hello")


SECTIONS: List[Section] = [
    Section("options", "Options", show_options),
    Section("di", "DI", show_dependency_injection),
    Section("repository", "Repository & Specification", show_repository),
    Section("event-aggregator", "Event Aggregator", show_event_aggregator),
    Section("mediator", "Mediator", show_mediator),
    Section("result", "Result", show_result),
    Section("null-object", "Null Object", show_null_object),
    Section("async", "Async/Await", show_async),
    Section("iterator", "Iterator", show_iterator),
    Section("reactive", "Reactive", show_reactive),
    Section("middleware", "Decorator / Middleware", show_middleware),
    Section("pipeline", "Pipeline", show_pipeline),
    Section("template-method", "Template Method", show_template_method),
]
