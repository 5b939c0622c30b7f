from newsroom.domain.newspaper.util.di.provider import NewspaperProvider

__all__ = ["NewspaperProvider"]
