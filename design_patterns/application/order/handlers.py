"""Order message handlers."""
from design_patterns.application.base.messages import CommandHandler, NotificationHandler
from design_patterns.domain.base.ports import ConsolePort
from .messages import CreateOrder, OrderCreated


class CreateOrderHandler(CommandHandler[CreateOrder, None]):
    def __init__(self, console: ConsolePort):
        self.console = console

    async def handle(self, command: CreateOrder) -> None:
        self.console.write_line("Mediator send command")


class OrderCreatedHandler(NotificationHandler[OrderCreated]):
    def __init__(self, console: ConsolePort):
        self.console = console

    async def handle(self, notification: OrderCreated) -> None:
        self.console.write_line("Mediator publish event")
