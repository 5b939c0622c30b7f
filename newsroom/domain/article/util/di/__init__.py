from newsroom.domain.article.util.di.provider import ArticleProvider

__all__ = ["ArticleProvider"]
