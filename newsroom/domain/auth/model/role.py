"""Role hierarchy for authorization."""

from enum import IntEnum
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer, WithJsonSchema


class Role(IntEnum):
    """Hierarchical roles with numeric ordering.

    Higher values carry more privilege. Gaps allow future role insertion
    without renumbering. Roles are stored and serialized by name.
    """

    USER = 10
    REPORTER = 20
    EDITOR = 30
    ADMIN = 40
    SUPER_ADMIN = 50


def _coerce_role(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return Role[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown role: {value}") from None
    return value


# Role accepted and emitted by name ("EDITOR") at the API boundary.
RoleName = Annotated[
    Role,
    BeforeValidator(_coerce_role),
    PlainSerializer(lambda role: role.name, return_type=str),
    WithJsonSchema({"type": "string", "enum": [r.name for r in Role]}),
]
