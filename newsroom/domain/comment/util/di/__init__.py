from newsroom.domain.comment.util.di.provider import CommentProvider

__all__ = ["CommentProvider"]
