from newsroom.domain.shared.model.value import EntityId


class ArticleId(EntityId):
    """Identifier of a article."""
