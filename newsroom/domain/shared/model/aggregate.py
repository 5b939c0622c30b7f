"""Base model for aggregate roots."""

from newsroom.domain.shared.model.entity import Entity


class Aggregate(Entity):
    """Root entity of a consistency boundary; repositories load and save aggregates."""
