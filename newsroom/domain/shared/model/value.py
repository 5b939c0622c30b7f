"""Identifier value objects."""

from typing import Self
from uuid import UUID, uuid4

from pydantic import RootModel


class EntityId(RootModel[UUID]):
    """UUID identity of one aggregate type.

    Ids of different aggregate types never compare equal, even over the same UUID.
    """

    @classmethod
    def generate(cls) -> Self:
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.root))
