"""Fail-fast check that every handler declares an authorization gate."""

import logging
from collections.abc import Iterator

from newsroom.domain.shared.authorization.gate import Gate
from newsroom.domain.shared.command import CommandHandler
from newsroom.domain.shared.error import ConfigurationError
from newsroom.domain.shared.query import QueryHandler

logger = logging.getLogger(__name__)


def _handler_classes(base: type) -> Iterator[type]:
    for sub in base.__subclasses__():
        yield sub
        yield from _handler_classes(sub)


def _check_handler_class(handler_cls: type) -> None:
    if not isinstance(getattr(handler_cls, "__auth__", None), Gate):
        raise ConfigurationError(f"Handler {handler_cls.__name__} has no __auth__ declaration")


def validate_all_handlers() -> None:
    """Check every imported CommandHandler/QueryHandler subclass.

    Raises ConfigurationError naming all handlers without a Gate in ``__auth__``.
    """
    missing: list[str] = []
    checked = 0
    for base in (CommandHandler, QueryHandler):
        for handler_cls in _handler_classes(base):
            checked += 1
            try:
                _check_handler_class(handler_cls)
            except ConfigurationError as e:
                missing.append(e.message)

    if missing:
        raise ConfigurationError(
            f"{len(missing)} handler(s) lack an authorization gate:\n"
            + "\n".join(f"  - {m}" for m in missing)
        )
    logger.info("Authorization gates declared on all %d handlers", checked)
