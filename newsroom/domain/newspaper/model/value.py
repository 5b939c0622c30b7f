from newsroom.domain.shared.model.value import EntityId


class NewspaperId(EntityId):
    """Identifier of a newspaper issue."""
