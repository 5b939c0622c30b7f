from newsroom.domain.shared.model.value import EntityId


class CommentId(EntityId):
    """Identifier of a comment."""
