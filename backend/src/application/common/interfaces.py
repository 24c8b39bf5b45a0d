"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class BlockDMChannelCommand(Command[BlockDMChannelResult]):
        current_user_id: str
        channel_id: str

    class BlockDMChannelHandler(CommandHandler[BlockDMChannelResult]):
        def __init__(self, dm_channel_repository: DMChannelRepository):
            self._dm_channel_repository = dm_channel_repository

        @returns_result("block DM channel")
        async def execute(self, command) -> Result[BlockDMChannelResult]:
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

from src.domain.result import Result

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> Result[T]:
        """Execute the command; failures come back as Failure, never raised"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> Result[T]:
        """Execute the query; failures come back as Failure, never raised"""
        ...
