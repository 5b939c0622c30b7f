"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """A domain object with identity.

    Assignments are validated so mutators cannot put an entity into a
    state its field types reject.
    """

    model_config = ConfigDict(validate_assignment=True)
