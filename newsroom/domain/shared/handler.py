"""Gated handler machinery shared by commands and queries.

A handler subclass becomes a dataclass, and its ``run`` is wrapped so the
class-level ``__auth__`` gate is enforced against the handler's ``identity``
field before the body executes.
"""

from abc import ABCMeta
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from functools import wraps
from typing import Any, dataclass_transform

from newsroom.domain.shared.authorization.gate import enforce_gate

_Run = Callable[..., Coroutine[Any, Any, Any]]


def gated(run: _Run) -> _Run:
    @wraps(run)
    async def gated_run(self: Any, message: Any) -> Any:
        handler_cls = type(self)
        enforce_gate(
            handler_cls.__name__,
            getattr(handler_cls, "__auth__", None),
            getattr(self, "identity", None),
        )
        return await run(self, message)

    return gated_run


@dataclass_transform()
class GatedHandlerMeta(ABCMeta):
    """ABC metaclass that dataclasses every concrete subclass and gates its run()."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if not any(isinstance(b, mcs) for b in bases):
            return cls

        cls = dataclass(cls)
        if "run" in cls.__dict__:
            cls.run = gated(cls.__dict__["run"])
        return cls
