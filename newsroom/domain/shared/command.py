"""Commands: requests that change state."""

from abc import abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

from newsroom.domain.shared.handler import GatedHandlerMeta


class Command(BaseModel): ...


class Result(BaseModel): ...


C = TypeVar("C", bound=Command)
R = TypeVar("R", bound=Result)


class CommandHandler(Generic[C, R], metaclass=GatedHandlerMeta):
    """Base class for command handlers.

    Declare the gate and receive the request identity as a field:
        class PublishHandler(CommandHandler[Publish, Published]):
            __auth__ = at_least(Role.EDITOR)
            identity: Identity
            article_service: ArticleService
    """

    @abstractmethod
    async def run(self, cmd: C) -> R: ...
