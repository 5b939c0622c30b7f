from newsroom.domain.shared.model.value import EntityId


class AdvertisementId(EntityId):
    """Identifier of a advertisement."""
