from newsroom.domain.shared.model.value import EntityId


class CategoryId(EntityId):
    """Identifier of a category."""
