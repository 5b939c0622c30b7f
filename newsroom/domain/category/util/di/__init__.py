from newsroom.domain.category.util.di.provider import CategoryProvider

__all__ = ["CategoryProvider"]
