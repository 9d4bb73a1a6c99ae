"""Chain asynchronous commands so each one's output feeds the next."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class AsyncCommand(ABC):
    """A command that turns an input into an output asynchronously."""

    @abstractmethod
    async def execute(self, input: Any) -> Any:
        """Run the command on ``input`` and return its output."""


class Pipeline(AsyncCommand):
    """Run ``first`` and pass its result to ``second``."""

    def __init__(self, first: AsyncCommand, second: AsyncCommand) -> None:
        self.first = first
        self.second = second

    async def execute(self, input: Any) -> Any:
        intermediate = await self.first.execute(input)
        return await self.second.execute(intermediate)


async def execute_pipeline(command: AsyncCommand) -> Any:
    """Run a command that takes no input."""
    return await command.execute(None)