from newsroom.domain.advertisement.util.di.provider import AdvertisementProvider

__all__ = ["AdvertisementProvider"]
