"""Queries: read-only requests. Most are public()."""

from abc import abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

from newsroom.domain.shared.handler import GatedHandlerMeta


class Query(BaseModel): ...


class Result(BaseModel): ...


Q = TypeVar("Q", bound=Query)
R = TypeVar("R", bound=Result)


class QueryHandler(Generic[Q, R], metaclass=GatedHandlerMeta):
    @abstractmethod
    async def run(self, query: Q) -> R: ...
